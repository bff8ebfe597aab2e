"""Command-line interface for directcloud_uploader."""

from __future__ import annotations

import os
import sys

import click
from dotenv import find_dotenv, load_dotenv

from directcloud_uploader._internal.api import DEFAULT_ENDPOINT
from directcloud_uploader.client import DirectCloudClient
from directcloud_uploader.config import ENV_ENDPOINT, ENV_PREFIX, load_credentials
from directcloud_uploader.exceptions import DirectCloudError
from directcloud_uploader.logging_setup import configure_logging
from directcloud_uploader.runner import run


def _environ(**overrides: str | None) -> dict[str, str]:
    """Process environment (after reading .env) with command-line overrides applied."""
    load_dotenv(find_dotenv(usecwd=True))
    environ = dict(os.environ)
    for name, value in overrides.items():
        if value is not None:
            environ[name] = value
    return environ


@click.group()
@click.version_option(package_name="directcloud-uploader")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """DirectCloud-BOX CLI - Mirror a local directory into a remote folder."""
    configure_logging(verbose)


@main.command()
@click.option("--node", "-n", default=None, help=f"Remote folder id (overrides {ENV_PREFIX}NODE)")
@click.option(
    "--file-path",
    "-f",
    default=None,
    help=f"Local file or directory, relative to the working directory "
    f"(overrides {ENV_PREFIX}FILE_PATH)",
)
@click.option("--endpoint", default=None, help=f"API base URL (overrides {ENV_ENDPOINT})")
def upload(node: str | None, file_path: str | None, endpoint: str | None) -> None:
    """Upload a file or directory tree to DirectCloud-BOX.

    Credentials are read from the DIRECTCLOUDBOX_* environment variables
    or a .env file.

    Examples:

        directcloud upload

        directcloud upload --node 42 --file-path dist
    """
    environ = _environ(
        **{
            ENV_PREFIX + "NODE": node,
            ENV_PREFIX + "FILE_PATH": file_path,
            ENV_ENDPOINT: endpoint,
        }
    )
    result = run(environ)
    if not result.success:
        click.echo(click.style(f"Upload failed: {result.error}", fg="red"), err=True)
        sys.exit(1)
    click.echo(click.style("Upload finished successfully!", fg="green"))


@main.command()
@click.option("--endpoint", default=None, help=f"API base URL (overrides {ENV_ENDPOINT})")
def login(endpoint: str | None) -> None:
    """Check that the configured credentials can obtain an access token."""
    environ = _environ(**{ENV_ENDPOINT: endpoint})
    try:
        credentials = load_credentials(environ)
        with DirectCloudClient(environ.get(ENV_ENDPOINT) or DEFAULT_ENDPOINT) as client:
            client.authenticate(credentials)
    except DirectCloudError as e:
        click.echo(click.style(f"Login failed: {e}", fg="red"), err=True)
        sys.exit(1)
    click.echo(click.style("Login successful!", fg="green"))


if __name__ == "__main__":
    main()
