# app.py
import argparse
import copy
import json
import logging
import os
import sys
from datetime import datetime
from urllib.parse import urlparse

from flask import Flask, request, jsonify

from seo_checker import FetchError, OnPageAnalyzer, ScoringModule
from seo_checker.export import export_checks_csv, format_report_text, report_to_json

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "Global": {
        "request_timeout": 10,
        "user_agent": "SEO-Checker/1.0",
        "accept_language": "en-US,en;q=0.8",
        "debug": False,
    },
}


def merge_config(base, override):
    """Section dicts are updated key by key, anything else is replaced."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path=None):
    if not path:
        return copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(path, 'r') as f:
            custom_config = json.load(f)
    except FileNotFoundError:
        logger.warning("Config file %s not found. Using default settings.", path)
        return copy.deepcopy(DEFAULT_CONFIG)
    except json.JSONDecodeError as e:
        logger.warning("Error decoding JSON from %s (%s). Using default settings.", path, e)
        return copy.deepcopy(DEFAULT_CONFIG)
    logger.info("Loaded custom configuration from %s", path)
    return merge_config(DEFAULT_CONFIG, custom_config)


app = Flask(__name__)
# Configuration used by the routes; replaced by run_cli when --config is given.
flask_app_config = copy.deepcopy(DEFAULT_CONFIG)


class SEOChecker:
    def __init__(self, url, output_format="json", config=None, source_name=None):
        self.config = config if config else copy.deepcopy(DEFAULT_CONFIG)
        if not url and source_name:
            # Markup read from a file with no URL behind it.
            self.url = ""
            self.domain = source_name
        elif not self.is_valid_url(url):
            raise ValueError(f"Invalid URL provided: {url}")
        else:
            self.url = self.normalize_url(url)
            self.domain = urlparse(self.url).netloc
        self.output_format = output_format
        self.report = None

    @staticmethod
    def normalize_url(url):
        url = (url or "").strip()
        if not url.startswith(('http://', 'https://')):
            return 'http://' + url
        return url

    def is_valid_url(self, url):
        if not url or not str(url).strip():
            return False
        try:
            result = urlparse(self.normalize_url(url))
            return all([result.scheme, result.netloc])
        except ValueError:
            return False

    def run_analysis(self):
        """Fetches the page and scores it. Raises FetchError when the page cannot be retrieved."""
        logger.info("Starting SEO check for: %s", self.url)
        on_page = OnPageAnalyzer(config={"Global": self.config.get("Global", {})})
        fields = on_page.analyze(self.url)
        return self._score(fields)

    def analyze_markup(self, markup):
        """Scores markup that was obtained elsewhere; no request is made."""
        on_page = OnPageAnalyzer(config={"Global": self.config.get("Global", {})})
        return self._score(on_page.extract(markup, self.url))

    def _score(self, fields):
        self.report = ScoringModule().analyze(url=self.url, full_report_data=fields)
        logger.info("SEO check complete for %s: score %s%%", self.url or self.domain, self.report.score)
        return self.report

    def save_report_to_file(self, filename_prefix="seo_report"):
        if self.report is None:
            return None
        os.makedirs("reports", exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        safe_domain_name = self.domain.replace(".", "_").replace(":", "_")
        filename = f"reports/{filename_prefix}_{safe_domain_name}_{timestamp}.{self.output_format}"
        try:
            with open(filename, "w") as f:
                if self.output_format == "json":
                    f.write(report_to_json(self.report))
                else:
                    f.write(format_report_text(self.report))
            logger.info("Report saved to %s", filename)
            return filename
        except IOError as e:
            logger.error("Error saving report: %s", e)
            return None


@app.route('/check', methods=['POST', 'GET'])
@app.route('/api/check', methods=['POST', 'GET'])
def check_endpoint():
    if request.method == 'GET':
        url_to_check = request.args.get('url')
    else:
        data = request.get_json(silent=True)
        if data is None:
            url_to_check = request.args.get('url') or request.form.get('url')
            if not url_to_check and request.data:
                return jsonify({"error": "Invalid JSON payload"}), 400
        else:
            url_to_check = data.get('url') if isinstance(data, dict) else None

    if not url_to_check or not str(url_to_check).strip():
        return jsonify({"error": "URL required"}), 400

    try:
        checker = SEOChecker(url=str(url_to_check), config=copy.deepcopy(flask_app_config))
    except ValueError as ve:
        return jsonify({"error": str(ve)}), 400

    try:
        report = checker.run_analysis()
    except FetchError as fe:
        return jsonify({"error": fe.message}), 500
    except Exception as e:
        logger.exception("Unexpected error while checking %s", checker.url)
        return jsonify({"error": str(e) or FetchError.default_message}), 500
    return jsonify(report.to_dict())


@app.route('/health')
def health():
    return jsonify({"status": "ok"})


def build_parser():
    parser = argparse.ArgumentParser(description="Single-page SEO checker")
    parser.add_argument("url", nargs='?', default=None, help="The URL to check (omit to run in API/server mode).")
    parser.add_argument("--output", choices=["json", "txt"], default="json", help="Output format for the saved report.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--markup-file", type=str, default=None, help="Check markup read from this file instead of fetching the URL.")
    parser.add_argument("--export-csv", type=str, default=None, help="Directory to write checks.csv into.")
    parser.add_argument("--no-save", action="store_true", help="Do not write the report under reports/.")
    parser.add_argument("--timeout", type=float, default=None, help="Fetch timeout in seconds (overrides config).")
    parser.add_argument("--user-agent", type=str, default=None, help="User-Agent header for the fetch (overrides config).")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Host for API/server mode.")
    parser.add_argument("--port", type=int, default=5000, help="Port for API/server mode.")
    parser.add_argument("--debug", action="store_true", help="Verbose logging.")
    return parser


def build_config(args):
    """Config file merged over the defaults, then command line overrides."""
    current_config = load_config(args.config)
    g = current_config.setdefault("Global", {})
    if args.timeout is not None:
        g["request_timeout"] = args.timeout
    if args.user_agent:
        g["user_agent"] = args.user_agent
    if args.debug:
        g["debug"] = True
    return current_config


def run_cli(args, current_config):
    global flask_app_config
    flask_app_config = current_config

    # Without a URL or markup file, run in API/server mode.
    if not args.url and not args.markup_file:
        print(f"Starting Flask server on http://{args.host}:{args.port}/ (API mode)")
        app.run(host=args.host, port=args.port, debug=False)
        return 0

    try:
        source_name = os.path.basename(args.markup_file) if args.markup_file else None
        checker = SEOChecker(args.url, output_format=args.output, config=current_config, source_name=source_name)
        if args.markup_file:
            with open(args.markup_file, 'r', encoding='utf-8', errors='replace') as f:
                report = checker.analyze_markup(f.read())
        else:
            report = checker.run_analysis()
    except ValueError as ve:
        print(f"Error: {ve}")
        return 2
    except (FetchError, OSError) as e:
        print(f"Error: {e}")
        return 1

    print("\n--- Analysis Summary ---")
    print(format_report_text(report))

    if not args.no_save:
        checker.save_report_to_file()
    if args.export_csv:
        os.makedirs(args.export_csv, exist_ok=True)
        csv_path = os.path.join(args.export_csv, "checks.csv")
        export_checks_csv(csv_path, report)
        print(f"Checks exported to {csv_path}")
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    current_config = build_config(args)
    logging.basicConfig(
        level=logging.DEBUG if current_config["Global"].get("debug") else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run_cli(args, current_config)


if __name__ == "__main__":
    sys.exit(main())
