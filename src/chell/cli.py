"""Command-line interface for running test suites."""

import sys
from typing import Optional, Sequence

import click

from chell import __version__
from chell.config import ReportTarget, RunConfig
from chell.console import error, make_console
from chell.core.runner import TestRunner
from chell.core.selection import select_tests
from chell.core.suite import SuiteNode, flatten_all
from chell.output import ConsoleOutput
from chell.report import ResultStatistics, get_reporter, write_report


def build_command(suites: Sequence[SuiteNode]) -> click.Command:
    """Create the command that runs ``suites``."""

    @click.command(context_settings={"help_option_names": ["-h", "--help"]})
    @click.version_option(version=__version__, prog_name="chell")
    @click.option("--verbose", "-v", is_flag=True, help="Print more output.")
    @click.option(
        "--xml-report",
        multiple=True,
        type=click.Path(dir_okay=False),
        help="Write a parsable report to a given path, in XML.",
    )
    @click.option(
        "--json-report",
        multiple=True,
        type=click.Path(dir_okay=False),
        help="Write a parsable report to a given path, in JSON.",
    )
    @click.option(
        "--text-report",
        multiple=True,
        type=click.Path(dir_okay=False),
        help="Write a human-readable report to a given path.",
    )
    @click.option("--seed", type=int, help="The seed used for random numbers in tests.")
    @click.option(
        "--timeout",
        type=click.IntRange(min=0),
        help="The maximum duration of a test, in milliseconds.",
    )
    @click.option(
        "--color",
        type=click.Choice(["always", "auto", "never"]),
        help="Whether to enable color (default: auto).",
    )
    @click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(dir_okay=False),
        help="Path to a JSON file with default run options.",
    )
    @click.argument("filters", nargs=-1)
    def main(
        verbose: bool,
        xml_report: tuple[str, ...],
        json_report: tuple[str, ...],
        text_report: tuple[str, ...],
        seed: Optional[int],
        timeout: Optional[int],
        color: Optional[str],
        config_path: Optional[str],
        filters: tuple[str, ...],
    ) -> None:
        """Run tests, optionally only those named by FILTERS.

        A filter selects the test with exactly that name, or every test
        inside the suite with that name.
        """
        try:
            reports = [
                *(ReportTarget(path=p, format="xml") for p in xml_report),
                *(ReportTarget(path=p, format="json") for p in json_report),
                *(ReportTarget(path=p, format="text") for p in text_report),
            ]
            config = RunConfig.from_file(config_path) if config_path else RunConfig()
            config = config.merged(
                verbose=verbose,
                reports=reports,
                seed=seed,
                timeout_ms=timeout,
                color=color,
                filters=list(filters),
            )
        except FileNotFoundError as e:
            error(str(e))
            sys.exit(1)
        except ValueError as e:
            error(f"Invalid configuration: {e}")
            sys.exit(1)

        sys.exit(run_suites(suites, config))

    return main


def run_suites(suites: Sequence[SuiteNode], config: RunConfig) -> int:
    """Run the selected tests, write reports and print the summary.

    Returns:
        The process exit status: 0 if nothing failed or aborted, else 1
    """
    console = make_console(config.color)
    options = config.test_options()
    if config.verbose:
        console.print(f"Using seed {options.seed}", markup=False, highlight=False)

    tests = select_tests(flatten_all(suites), config.filters)
    runner = TestRunner(options, ConsoleOutput(console, verbose=config.verbose))
    results = runner.run(tests)

    for target in config.reports:
        reporter = get_reporter(target.format)
        if config.verbose:
            console.print(
                f"Writing {reporter.name} report to {target.path!r}",
                markup=False,
                highlight=False,
            )
        try:
            write_report(target.path, reporter, results)
        except OSError as e:
            error(f"Could not write {reporter.name} report to {target.path}: {e}")
            return 1

    stats = ResultStatistics.from_results(results)
    console.print(stats.format(), markup=False, highlight=False)
    return 0 if stats.succeeded else 1


def default_main(suites: Sequence[SuiteNode], args: Optional[Sequence[str]] = None) -> None:
    """Run ``suites`` from the command line and exit with the outcome.

    Typical use at the bottom of a test program:

        if __name__ == "__main__":
            default_main([tests])
    """
    build_command(suites).main(args=list(args) if args is not None else None)
