from __future__ import annotations

import argparse
import sys

from ecomimic_site.core.config import ConfigError, load_config, log_path_from_env
from ecomimic_site.utils.log import log_event, redact, set_log_path
from ecomimic_site.web.server import STATIC_URL_PATH, TOKEN_ROUTE


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ecomimic-site", description="EcoMimic 3.0 landing page server")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--env-file", default="", help="Path to a .env file (default: search upwards from cwd)")
    parser.add_argument("--static-dir", default=None, help="Document root served under /site/")
    parser.add_argument("--debug", dest="debug", action="store_true", default=False)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    ns = _build_parser().parse_args(args)

    try:
        config = load_config(
            env_file=ns.env_file or None,
            overrides={"host": ns.host, "port": ns.port, "static_dir": ns.static_dir},
        )
    except ConfigError as exc:
        print(f"Fatal: {exc}", file=sys.stderr)
        log_event("startup", f"refused to start: {exc}", log_path_from_env())
        return 1

    set_log_path(config.log_path)
    log_event("startup", f"host={config.host} port={config.port} key={redact(config.api_key)}")

    from ecomimic_site.ui.dash_app import main as dash_main

    print("EcoMimic site started!")
    print(f"   - Page:           {config.base_url}/")
    print(f"   - Token endpoint: {config.base_url}{TOKEN_ROUTE}")
    print(f"   - Static files:   {config.base_url}{STATIC_URL_PATH}/")
    log_event("startup", f"serving on {config.base_url}")
    dash_main(config, debug=ns.debug, use_reloader=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
