"""oval-updater command line entry point."""
import click

from . import __version__
from .config import UpdaterConfig
from .logging import setup_logging
from .updater import process_oval_file


@click.command(context_settings={"help_option_names": ["--help"]})
@click.option("--os", "os_name", required=True, help="Operating system")
@click.option("--uri", required=True, help="URI where to download deb packages from")
@click.option(
    "--file", "filename", required=True,
    type=click.Path(dir_okay=False), help="OVAL definition file",
)
@click.option("--debug", "debug_level", type=int, default=None, help="Set debug level")
@click.option("--quiet", is_flag=True, default=False, help="Suppress debug output to stderr")
@click.option("--syslog", is_flag=True, default=False, help="Mirror debug output to syslog")
@click.version_option(__version__, prog_name="oval-updater")
def main(os_name, uri, filename, debug_level, quiet, syslog):
    """Extract the package version criteria of OVAL vulnerability definitions.

    Definitions whose criteria fully resolve to a package name and version
    constraint are shown with --debug 2; partially resolved ones with
    --debug 3.
    """
    config = UpdaterConfig.from_env()
    if debug_level is not None:
        config.debug_level = debug_level
    if quiet:
        config.quiet = True
    config.syslog = syslog

    setup_logging(config.debug_level, config.quiet, config.syslog)
    raise SystemExit(process_oval_file(filename, os_name, uri, config))


if __name__ == "__main__":
    main()
