import argparse
import json

import jsonschema

from config import load_config
from core.logger import log_event, set_log_file
from core.site_builder import SiteBuilder


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Build the StockYan learn pages and sitemap.")
    parser.add_argument("--data", dest="data_file", help="Path to the articles JSON file.")
    parser.add_argument("--output", dest="output_dir", help="Directory the learn pages are written to.")
    parser.add_argument("--site-url", dest="site_url", help="Site base URL used for canonical links.")
    parser.add_argument("--sitemap", dest="sitemap_file", help="Path of the sitemap to regenerate.")
    parser.add_argument("--env-file", dest="env_file", help="Optional .env file to load.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    overrides = {
        "data_file": args.data_file,
        "output_dir": args.output_dir,
        "site_url": args.site_url,
        "sitemap_file": args.sitemap_file,
    }
    config = load_config(args.env_file, overrides)
    set_log_file(config["log_file"])

    print("Building StockYan learn pages...")
    log_event("INFO", "Build started", {"data_file": str(config["data_file"])})
    try:
        SiteBuilder.from_config(config).build()
    except (json.JSONDecodeError, jsonschema.ValidationError, KeyError, ValueError, OSError) as err:
        log_event("ERROR", f"Build failed: {err}")
        raise
    print("Done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
