"""Handler for 'mdkanban config'."""

from mdkanban.cli._common import error, output_json, output_result
from mdkanban.config import read_config, write_config_key


def config(args) -> int:
    """Show settings, show one setting, or set one."""
    settings = read_config(args.dir)

    if args.key is None:
        if args.json:
            output_json(settings)
        else:
            for key, value in settings.items():
                print(f"{key.replace('_', '-')} = {value}")
        return 0

    key = args.key.replace("-", "_")
    if key not in settings:
        error(f"Unknown setting '{args.key}'", args.json)

    if args.value is None:
        output_result({key: settings[key]}, str(settings[key]), args.json)
        return 0

    try:
        write_config_key(args.dir, key, args.value)
    except ValueError as e:
        error(str(e), args.json)

    output_result({key: read_config(args.dir)[key]}, f"Set {args.key} = {args.value}", args.json)
    return 0
