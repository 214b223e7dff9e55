#!/usr/bin/env python3
"""
Example usage of JSON Configuration.

This script loads a JSON document into a configuration, edits it through
section paths and saves it back.
"""

import logging
import tempfile
from pathlib import Path
from json_configuration import ErrorHandler, JsonConfiguration


def main():
    """Main example function."""
    print("JSON Configuration Example")
    print("=" * 50)

    document = '''
    {
        "server": {"host": "0.0.0.0", "port": 8080},
        "max_upload": 9999999999,
        "routes": [{"path": "/", "handler": "index"}],
        "unused": null
    }
    '''

    error_handler = ErrorHandler(collect=True)
    config = JsonConfiguration(error_handler=error_handler)
    config.load_from_string(document)

    print(f"server.port = {config.get('server.port')!r}")
    print(f"max_upload  = {config.get('max_upload')!r}")
    print(f"routes      = {config.get('routes')!r}")
    print(f"keys        = {config.get_keys(True)}")

    for drop in error_handler.drops:
        print(f"dropped {drop.value_type} at {drop.path} ({drop.reason.value})")

    config.set("server.tls.enabled", True)

    with tempfile.TemporaryDirectory() as temp_dir:
        path = Path(temp_dir) / "config.json"
        config.save(path)
        print()
        print(path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
