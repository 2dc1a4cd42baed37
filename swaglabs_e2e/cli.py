import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .browser_engine import BrowserEngine
from .config import BROWSERS, SuiteConfig
from .report import RunReport
from .runner import ScenarioRunner
from .scenarios import SCENARIOS, Scenario, all_tags, select_scenarios

logger = logging.getLogger(__name__)

DEFAULT_TAG = "smoke"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swaglabs-e2e",
        description="Run browser scenarios against the Sauce Demo store"
    )
    parser.add_argument("--list", action="store_true", help="list scenarios and exit")
    parser.add_argument("-s", "--scenario", action="append", default=[], dest="scenarios",
                        metavar="NAME", help="scenario to run (repeatable)")
    parser.add_argument("-t", "--tag", action="append", default=[], dest="tags",
                        metavar="TAG", help=f"run scenarios with this tag (default: {DEFAULT_TAG})")
    parser.add_argument("--browser", choices=BROWSERS)
    parser.add_argument("--headed", action="store_true", help="show the browser window")
    parser.add_argument("--base-url")
    parser.add_argument("--report", metavar="PATH", help="write the JSON run report here")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def list_scenarios() -> str:
    lines = [f"{s.name:<24} [{', '.join(sorted(s.tags))}] {s.title}" for s in SCENARIOS.values()]
    lines.append(f"tags: {', '.join(all_tags())}")
    return "\n".join(lines)


async def run(config: SuiteConfig, scenarios: List[Scenario]) -> RunReport:
    async with BrowserEngine(config) as engine:
        return await ScenarioRunner(engine, config).run(scenarios)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the scenario runner"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.list:
        print(list_scenarios())
        return 0

    unknown = [name for name in args.scenarios if name not in SCENARIOS]
    if unknown:
        parser.error(f"unknown scenario(s): {', '.join(unknown)}")

    unknown_tags = sorted(set(args.tags) - set(all_tags()))
    if unknown_tags:
        parser.error(f"unknown tag(s): {', '.join(unknown_tags)}")

    tags = args.tags or ([] if args.scenarios else [DEFAULT_TAG])
    scenarios = select_scenarios(args.scenarios, tags)
    if not scenarios:
        logger.error("No scenarios selected")
        return 1

    config = SuiteConfig.from_env(
        browser=args.browser,
        base_url=args.base_url,
        headless=False if args.headed else None
    )

    try:
        report = asyncio.run(run(config, scenarios))
    except KeyboardInterrupt:
        logger.info("Run stopped by user")
        return 130

    print(report.summary())

    if args.report:
        with open(args.report, "w") as fh:
            fh.write(report.export_json())
        logger.info("Report written to %s", args.report)

    return 0 if report.success else 1


if __name__ == "__main__":
    sys.exit(main())
