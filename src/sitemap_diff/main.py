from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import httpx
import typer

from sitemap_diff.config import CompareConfig, ConfigError, build_config
from sitemap_diff.core import SitemapChecker
from sitemap_diff.observability import configure_logging, get_logger
from sitemap_diff.report import render_report
from sitemap_diff.sitemap import HttpFetcher, SitemapDiffError, SitemapResolver

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sitemap_diff.comparison import ComparisonResult

logger = get_logger(__name__)

app = typer.Typer(add_completion=False)


@dataclass(frozen=True, slots=True)
class ApplicationComponents:
    client: httpx.AsyncClient
    checker: SitemapChecker


@asynccontextmanager
async def create_application(config: CompareConfig) -> AsyncIterator[ApplicationComponents]:
    client = httpx.AsyncClient(timeout=httpx.Timeout(config.timeout_seconds), follow_redirects=True)
    fetcher = HttpFetcher(client)
    resolver = SitemapResolver(fetcher, max_depth=config.max_depth)
    checker = SitemapChecker(resolver=resolver)

    try:
        yield ApplicationComponents(client=client, checker=checker)
    finally:
        await client.aclose()


async def _compare(config: CompareConfig) -> ComparisonResult:
    async with create_application(config) as app_state:
        return await app_state.checker.run(config)


@app.command()
def run(
    source: Annotated[str | None, typer.Option("--source", help="Source Sitemap URL - Sitemap you want to check against")] = None,
    new: Annotated[str | None, typer.Option("--new", help="New Sitemap URL - Sitemap entries you want to check for presence")] = None,
    new_base_url: Annotated[
        str | None,
        typer.Option("--newBaseURL", help="Base URL that replaces scheme and host of sub-sitemaps if --new is a sitemap index"),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", help="Regex for source URLs that don't need to be in the new sitemap. Can be repeated."),
    ] = None,
    config: Annotated[Path | None, typer.Option("-c", "--config", help="TOML file with comparison settings")] = None,
    timeout: Annotated[float | None, typer.Option("--timeout", help="Per-request timeout in seconds")] = None,
) -> None:
    configure_logging()
    try:
        settings = build_config(
            config,
            source_url=source,
            new_url=new,
            new_base_url=new_base_url,
            exclude=tuple(exclude) if exclude else None,
            timeout_seconds=timeout,
        )
        result = asyncio.run(_compare(settings))
    except ConfigError as exc:
        logger.error("config_invalid", error=str(exc))
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except SitemapDiffError as exc:
        logger.error("comparison_failed", error=str(exc), error_type=type(exc).__name__)
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(render_report(settings, result))


if __name__ == "__main__":
    app()
