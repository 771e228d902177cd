"""
Command-line interface for article-scorer.

Configures the scoring provider, lists and selects models, scores an
article against the rubric, and looks up titles on Wikipedia.

Usage:
    article-scorer config provider cerebras   # Switch provider
    article-scorer config key csk-...         # Store the provider's API key
    article-scorer models                     # List models for the provider
    article-scorer select llama-3.3-70b       # Persist the selected model
    article-scorer score article.txt          # Score an article (or stdin)
    article-scorer wiki 東京タワー              # Title lookup and templates
"""

import asyncio
import os
import sys
from typing import Any

import click

from article_scorer.config.settings import get_settings
from article_scorer.observability.logging import setup_logging
from article_scorer.scoring.result import Err, Ok
from article_scorer.scoring.schemas import SCORING_AXES, ProviderType, ScoringResult

PROVIDER_CHOICES = click.Choice([p.value for p in ProviderType])


def _mask(key: str | None) -> str:
    if not key:
        return "(not set)"
    if len(key) <= 8:
        return "*" * len(key)
    return f"{key[:4]}…{key[-4:]}"


def _format_points(value: float) -> str:
    return f"{value:g}"


def score_color(total: float) -> str:
    """Color band for a total score: high >= 80, mid >= 60, low otherwise."""
    if total >= 80:
        return "green"
    if total >= 60:
        return "yellow"
    return "red"


def render_result(result: ScoringResult) -> None:
    """Print a scoring result as category, total, axis table and advice."""
    click.echo(f"\nCategory: {result.category}")
    click.echo(
        click.style(
            f"Total: {_format_points(result.total)} / 100",
            fg=score_color(result.total),
            bold=True,
        )
    )
    click.echo("-" * 60)
    click.echo(f"  {'Axis':<16} {'Max':>4} {'Score':>6}  Reason")
    click.echo("-" * 60)
    for axis in SCORING_AXES:
        score = getattr(result.details, axis.key)
        reason = getattr(result.reasons, axis.key)
        click.echo(f"  {axis.label:<16} {axis.ceiling:>4} {_format_points(score):>6}  {reason}")
    click.echo("-" * 60)

    if result.advice:
        click.echo("\nAdvice:")
        click.echo(result.advice)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Article Scorer - rubric scoring with interchangeable LLM backends."""
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        get_settings.cache_clear()

    setup_logging()


# ── Configuration ────────────────────────────────────────


@main.group()
def config() -> None:
    """Show or change provider settings."""


@config.command("show")
def config_show() -> None:
    """Show the active provider, stored keys and selected model."""
    from article_scorer.store import get_store, load_settings

    async def run():
        settings = await load_settings(await get_store())

        click.echo("\nProvider Settings:")
        click.echo("-" * 40)
        click.echo(f"  Provider:        {settings.provider.value}")
        click.echo(f"  OpenRouter key:  {_mask(settings.openrouter_api_key)}")
        click.echo(f"  Gemini key:      {_mask(settings.gemini_api_key)}")
        click.echo(f"  Cerebras key:    {_mask(settings.cerebras_api_key)}")
        click.echo(f"  Selected model:  {settings.selected_model or '(none)'}")
        click.echo("-" * 40)

    asyncio.run(run())


@config.command("provider")
@click.argument("name", type=PROVIDER_CHOICES)
def config_provider(name: str) -> None:
    """Switch the active provider."""
    from article_scorer.store import get_store, save_settings

    async def run():
        outcome = await save_settings(await get_store(), provider=ProviderType(name))
        if isinstance(outcome, Err):
            click.echo(click.style(f"Failed to save settings: {outcome.error}", fg="red"), err=True)
            sys.exit(1)
        click.echo(f"Provider set to {name}")

    asyncio.run(run())


@config.command("key")
@click.argument("api_key")
@click.option(
    "--provider",
    "provider_name",
    type=PROVIDER_CHOICES,
    default=None,
    help="Provider the key belongs to (defaults to the active provider)",
)
def config_key(api_key: str, provider_name: str | None) -> None:
    """Store an API key."""
    from article_scorer.store import get_store, load_settings, save_settings
    from article_scorer.store.user_settings import API_KEY_FIELDS

    async def run():
        store = await get_store()
        if provider_name:
            provider = ProviderType(provider_name)
        else:
            provider = (await load_settings(store)).provider

        changes: dict[str, Any] = {API_KEY_FIELDS[provider]: api_key.strip()}
        outcome = await save_settings(store, **changes)
        if isinstance(outcome, Err):
            click.echo(click.style(f"Failed to save settings: {outcome.error}", fg="red"), err=True)
            sys.exit(1)
        click.echo(f"API key saved for {provider.value}")

    asyncio.run(run())


# ── Models ───────────────────────────────────────────────


@main.command()
def models() -> None:
    """List models offered by the active provider."""
    from article_scorer.observability import bind_context, clear_context
    from article_scorer.scoring.controller import ScoringController
    from article_scorer.store import get_store, load_settings

    async def run():
        store = await get_store()
        settings = await load_settings(store)
        bind_context(provider=settings.provider.value)
        try:
            controller = ScoringController(store)
            outcome = await controller.load_models()
        finally:
            clear_context()
        if isinstance(outcome, Err):
            click.echo(click.style(str(outcome.error), fg="red"), err=True)
            sys.exit(1)

        selection = outcome.value
        click.echo(f"\nModels ({selection.provider.value}):")
        click.echo("-" * 60)
        for model in selection.models:
            marker = "*" if model.id == selection.selected_model else " "
            line = f" {marker} {model.id}  {model.name}"
            if model.pricing:
                line += f"  [{model.pricing}]"
            click.echo(line)
        click.echo("-" * 60)
        click.echo(f"Selected: {selection.selected_model or '(none)'}")

    asyncio.run(run())


@main.command()
@click.argument("model_id")
def select(model_id: str) -> None:
    """Persist the model used for scoring."""
    from article_scorer.scoring.controller import ScoringController
    from article_scorer.store import get_store

    async def run():
        controller = ScoringController(await get_store())
        outcome = await controller.select_model(model_id)
        if isinstance(outcome, Err):
            click.echo(click.style(f"Failed to save settings: {outcome.error}", fg="red"), err=True)
            sys.exit(1)
        click.echo(f"Selected model: {model_id}")

    asyncio.run(run())


# ── Scoring ──────────────────────────────────────────────


@main.command()
@click.argument("article", type=click.File("r", encoding="utf-8"), default="-")
def score(article: Any) -> None:
    """Score an article read from a file (or stdin)."""
    from article_scorer.observability import bind_context, clear_context, get_logger
    from article_scorer.scoring.controller import ScoringController
    from article_scorer.store import get_store, load_settings

    logger = get_logger(__name__)
    text = article.read()

    async def run():
        store = await get_store()
        settings = await load_settings(store)
        bind_context(provider=settings.provider.value, model=settings.selected_model)
        try:
            controller = ScoringController(store)
            click.echo(f"Scoring {len(text):,} characters...", err=True)
            logger.debug("Scoring article", chars=len(text))
            outcome = await controller.score(text)
        finally:
            clear_context()

        if isinstance(outcome, Ok):
            render_result(outcome.value)
            return

        click.echo(click.style(f"Error: {outcome.error}", fg="red"), err=True)
        sys.exit(1)

    asyncio.run(run())


# ── Wikipedia ────────────────────────────────────────────


@main.command()
@click.argument("title")
def wiki(title: str) -> None:
    """Check a title on Japanese/English Wikipedia and print link templates."""
    from article_scorer.wikipedia import check_title_both, generate_templates

    async def run():
        report = await check_title_both(title)

        click.echo(f"\nWikipedia lookup: {title}")
        click.echo("-" * 40)
        for lang, outcome in (("ja", report.ja), ("en", report.en)):
            if isinstance(outcome, Err):
                click.echo(click.style(f"  {lang}: error: {outcome.error}", fg="red"))
                continue
            result = outcome.value
            if not result.exists:
                status = "missing"
            elif result.is_redirect:
                status = f"redirect -> {result.redirect_target}"
            else:
                status = f"exists ({result.title})"
            if result.is_disambiguation:
                status += " [disambiguation]"
            click.echo(f"  {lang}: {status}")
        click.echo("-" * 40)

        if report.failed:
            click.echo(click.style("Both lookups failed", fg="red"), err=True)
            sys.exit(1)

        templates = generate_templates(report.result_or_missing("ja"), report.result_or_missing("en"))
        click.echo("\nTemplates:")
        for template in templates:
            click.echo(f"  {template.template}    # {template.description}")

    asyncio.run(run())


if __name__ == "__main__":
    main()
