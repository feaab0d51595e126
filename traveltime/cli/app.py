"""
Main CLI application for traveltime
Prints the travel time to work or home and the delay caused by traffic
"""

import asyncio
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from traveltime.commute.service import CommuteService
from traveltime.core.errors import RequestTimeoutError, TravelTimeError
from traveltime.core.models import TravelResult
from traveltime.core.template import OutputTemplate
from traveltime.maps.client import GoogleMapsClient

from .config import TravelConfig

# Initialize Typer app
app = typer.Typer(
    name="traveltime",
    help="traveltime - Travel time between home and work with traffic delay",
    add_completion=False,
)

# Diagnostics go to stderr, the rendered result is echoed to stdout unchanged
err_console = Console(stderr=True, soft_wrap=True)


def setup_logging(level: str) -> None:
    """Send log records to stderr through rich"""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


async def fetch_travel_result(config: TravelConfig) -> TravelResult:
    """Run the upstream calls within the configured timeout budget"""
    client = GoogleMapsClient(api_key=config.api_key, timeout=config.timeout)
    service = CommuteService(client)

    try:
        return await asyncio.wait_for(
            service.resolve(work=config.work, home=config.home),
            timeout=config.timeout,
        )
    except asyncio.TimeoutError:
        raise RequestTimeoutError(f"Upstream calls did not finish within {config.timeout:g}s")


@app.command()
def run():
    """
    Show the travel time between home and work

    The location nearest to your current position is the origin, the other
    one the destination. Configure with environment variables:

        GOOGLE_API_KEY        Google Maps Platform API key
        TRAVEL_WORK_COORD     work location as name,lat,lng
        TRAVEL_HOME_COORD     home location as name,lat,lng
        TRAVEL_FORMAT_OUTPUT  output template (optional)
        TRAVEL_TIMEOUT        timeout in seconds (optional, default 5)
        TRAVEL_LOG_LEVEL      log level (optional, default WARNING)
    """
    try:
        config = TravelConfig.from_env()
        setup_logging(config.log_level)

        # Fail on a bad template before calling any API
        template = OutputTemplate(config.output_format)

        result = asyncio.run(fetch_travel_result(config))
        output = template.render(result)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Cancelled by user[/yellow]")
        raise typer.Exit(1)
    except TravelTimeError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    typer.echo(output)


def main():
    """Main entry point for CLI"""
    # Load environment variables
    from dotenv import load_dotenv
    load_dotenv()

    app()


if __name__ == "__main__":
    main()
