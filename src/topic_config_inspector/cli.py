"""Command line interface entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from topic_config_inspector.config_description import (
    TopicConfigDescribeError,
    describe_topic_config,
)
from topic_config_inspector.configuration import (
    ClientSettings,
    ConfigOverrides,
    ConfigurationError,
    build_client_config,
)
from topic_config_inspector.results_writing import render_config_entries

AUTH_DIR_ENVVAR = "KAFKA_AUTH_DIR"


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="topic-config-inspector")
@click.option(
    "-t",
    "--topic",
    "topic",
    required=True,
    help="Topic name (required).",
)
@click.option(
    "-X",
    "overrides",
    multiple=True,
    metavar="KEY=VALUE",
    help="Kafka client configuration, may be repeated.",
)
@click.option(
    "-c",
    "--cluster",
    "cluster_profile",
    required=False,
    help="Cluster profile name (e.g. aiven).",
)
@click.option(
    "-authdir",
    "--authdir",
    "auth_dir",
    required=False,
    envvar=AUTH_DIR_ENVVAR,
    show_envvar=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory containing the cafile, certfile and keyfile credentials.",
)
def cli(
    topic: str,
    overrides: tuple[str, ...],
    cluster_profile: str | None,
    auth_dir: Path | None,
) -> None:
    """Print the effective configuration of a Kafka topic."""
    if not topic.strip():
        raise CliError("Topic name (-t) must not be empty.")
    settings = ClientSettings(
        topic=topic,
        overrides=ConfigOverrides.from_values(overrides),
        cluster_profile=cluster_profile,
        auth_dir=auth_dir,
    )
    try:
        client_config = build_client_config(settings)
        entries = describe_topic_config(client_config, settings.topic)
    except (ConfigurationError, TopicConfigDescribeError) as exc:
        raise CliError(str(exc)) from exc
    for line in render_config_entries(entries):
        click.echo(line)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
