"""CLI entrypoint for the WordPress question-answering pipeline."""

import json
import logging

import typer

from rag_wordpress import messages
from rag_wordpress.config import Settings
from rag_wordpress.pipeline import ask_question, create_default_pipeline
from rag_wordpress.types import Response

app = typer.Typer(help="Ask questions about the posts of a WordPress site")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def render_response(response: Response) -> str:
    """Format a response for the terminal: answer, then numbered sources."""
    lines = [response.answer]
    if response.sources:
        lines.append("")
        lines.append(messages.SOURCES_HEADING)
        for i, src in enumerate(response.sources, start=1):
            relevance = int(src.similarity * 100 + 0.5)
            details = f"{messages.RELEVANCE_LABEL}: {relevance}%"
            if src.date:
                details += f" • {messages.DATE_LABEL}: {src.date}"
            lines.append(f"  [{i}] {src.title}")
            lines.append(f"      {src.link}")
            lines.append(f"      {details}")
    return "\n".join(lines)


@app.command()
def hello() -> None:
    """Smoke test."""
    typer.echo("Assistant is ready.")


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to ask"),
    site_url: str = typer.Option("https://postvai.com", help="WordPress site URL"),
    top_k: int = typer.Option(5, help="Maximum number of sources"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw response as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Answer a single question."""
    _configure_logging(verbose)
    settings = Settings(site_url=site_url, top_k=top_k)
    pipeline = create_default_pipeline(settings)
    response = ask_question(question, pipeline=pipeline)

    if as_json:
        typer.echo(json.dumps(response.to_dict(), ensure_ascii=False, indent=2))
    else:
        typer.echo(render_response(response))


@app.command()
def chat(
    site_url: str = typer.Option("https://postvai.com", help="WordPress site URL"),
    top_k: int = typer.Option(5, help="Maximum number of sources"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Interactive REPL. Answers are cached for the whole session."""
    _configure_logging(verbose)
    settings = Settings(site_url=site_url, top_k=top_k)
    pipeline = create_default_pipeline(settings)

    typer.echo("Chat (type 'quit' or 'exit' to stop)")
    typer.echo(f"Site: {site_url}")
    typer.echo("")

    while True:
        try:
            question = input("You: ").strip()
        except (EOFError, KeyboardInterrupt):
            typer.echo("\nGoodbye!")
            break

        if question.lower() in ("quit", "exit", "q"):
            typer.echo("Goodbye!")
            break

        if not question:
            continue

        if len(question) < settings.min_query_length:
            typer.echo(
                messages.QUESTION_LENGTH_HINT.format(min_length=settings.min_query_length)
            )
            continue

        response = ask_question(question, pipeline=pipeline)
        typer.echo("")
        typer.echo(render_response(response))
        typer.echo("")


if __name__ == "__main__":
    app()
