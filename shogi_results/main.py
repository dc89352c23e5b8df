from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
from datetime import date

import orjson

from .adapters import fetch_month
from .scanner import scan
from .utils import month_key, months_between, parse_month, read_env, write_json

logger = logging.getLogger(__name__)

ROOT = pathlib.Path(__file__).resolve().parent


def load_config(path: str | pathlib.Path | None = None) -> dict:
    import yaml  # type: ignore

    cfg_path = pathlib.Path(path) if path else ROOT / "config.yaml"
    cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    base = read_env("SHOGI_RESULTS_BASE_URL")
    if base:
        cfg["base_url"] = base
    out = read_env("SHOGI_RESULTS_OUTPUT_DIR")
    if out:
        cfg["output_dir"] = out
    return cfg


def output_path(cfg: dict, year: int, month: int) -> pathlib.Path:
    return pathlib.Path(cfg.get("output_dir", "results")) / f"{month_key(year, month)}.json"


def month_cmd(cfg: dict, year: int, month: int) -> pathlib.Path:
    matches = fetch_month(cfg, year, month)
    out = output_path(cfg, year, month)
    write_json(out, [m.to_json() for m in matches])
    logger.info("Output: %s", out)
    return out


def all_cmd(cfg: dict, today: date | None = None) -> None:
    today = today or date.today()
    for year, month in months_between(int(cfg.get("since_year", 2006)), int(cfg.get("since_month", 4)), today):
        month_cmd(cfg, year, month)


def parse_cmd(src: str, out: str | None = None) -> None:
    matches = scan(pathlib.Path(src).read_text(encoding="utf-8"))
    data = [m.to_json() for m in matches]
    if out:
        write_json(out, data)
        logger.info("Output: %s", out)
    else:
        sys.stdout.write(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")


def validate_cmd(cfg: dict) -> None:
    # Every monthly file must be a list of matches with both players filled in
    ok = True
    out_dir = pathlib.Path(cfg.get("output_dir", "results"))
    files = sorted(out_dir.glob("*.json"))
    if not files:
        print(f"no results in {out_dir}")
        raise SystemExit(1)
    for p in files:
        data = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            print(f"{p.name} not a list")
            ok = False
            continue
        for idx, m in enumerate(data):
            missing = [f for f in ("beginDate", "endDate", "firstPlayer", "secondPlayer") if not m.get(f)]
            for side in ("firstPlayer", "secondPlayer"):
                player = m.get(side) or {}
                missing += [f"{side}.{f}" for f in ("id", "name", "result") if f not in player]
            if missing:
                print(f"{p.name}[{idx}] missing {', '.join(missing)}")
                ok = False
                break
    if not ok:
        raise SystemExit(1)
    print("ok")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="shogi_results", description="JSA monthly game results scraper")
    parser.add_argument("--config", help="path to config.yaml")
    sub = parser.add_subparsers(dest="cmd", required=True)
    p_month = sub.add_parser("month", help="scrape one month, e.g. 201804")
    p_month.add_argument("month")
    sub.add_parser("all", help="scrape every month since the configured start")
    p_parse = sub.add_parser("parse", help="scan a saved results page")
    p_parse.add_argument("file")
    p_parse.add_argument("--out")
    sub.add_parser("validate")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    if args.cmd == "parse":
        parse_cmd(args.file, args.out)
        return

    cfg = load_config(args.config)
    if args.cmd == "month":
        try:
            year, month = parse_month(args.month)
        except ValueError as e:
            parser.error(str(e))
        month_cmd(cfg, year, month)
    elif args.cmd == "all":
        all_cmd(cfg)
    elif args.cmd == "validate":
        validate_cmd(cfg)


if __name__ == "__main__":
    main()
