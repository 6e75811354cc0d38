import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from gptrust.config import settings
from gptrust.core.exceptions import GptrustError, RequestValidationError
from gptrust.core.logging import configure_logging
from gptrust.schemas.completions import CompletionPrompt, CreateCompletionRequest, StopWords
from gptrust.services.completions import create_completion
from gptrust.services.transport import HttpTransport

console = Console()
cli_app = typer.Typer(name="gptrust", help="Text completion client")


def _run_async(coro):
    """Run async code from sync CLI context."""
    return asyncio.run(coro)


def _build_transport() -> HttpTransport:
    return HttpTransport.from_settings(settings)


@cli_app.callback()
def main_callback():
    configure_logging(settings.gptrust_log_level)


@cli_app.command("complete")
def complete(
    prompts: list[str] = typer.Argument(..., help="Prompt text; pass several for a batch"),
    model: str = typer.Option(..., "--model", "-m", help="Model to complete with"),
    max_tokens: int = typer.Option(None, "--max-tokens", help="Maximum tokens to generate"),
    temperature: float = typer.Option(None, "--temperature", help="Sampling temperature (0-2)"),
    top_p: float = typer.Option(None, "--top-p", help="Nucleus sampling mass (0-1)"),
    n: int = typer.Option(None, "--n", help="Completions to return per prompt"),
    stop: list[str] = typer.Option(None, "--stop", help="Stop sequence (required); repeat for up to 4"),
    suffix: str = typer.Option(None, "--suffix", help="Text that follows the completion"),
    echo: bool = typer.Option(False, "--echo", help="Echo the prompt in the completion"),
    logprobs: int = typer.Option(None, "--logprobs", help="Return log probabilities of the top N tokens"),
    user: str = typer.Option(None, "--user", help="End-user identifier"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw response JSON"),
):
    """Request a completion and print the generated choices."""
    prompt = CompletionPrompt.text(prompts[0]) if len(prompts) == 1 else CompletionPrompt.texts(prompts)
    stop_words = None
    if stop:
        stop_words = StopWords.word(stop[0]) if len(stop) == 1 else StopWords.words(stop)

    try:
        request = CreateCompletionRequest(
            model=model,
            prompt=prompt,
            suffix=suffix,
            max_tokens=max_tokens,
            temperature=temperature,
            top_p=top_p,
            n=n,
            logprobs=logprobs,
            echo=echo or None,
            stop=stop_words,
            user=user,
        )
    except ValidationError as e:
        for error in e.errors(include_url=False):
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"[bold red]{field}: {error['msg']}[/bold red]")
        raise typer.Exit(code=1)

    async def _complete():
        async with _build_transport() as transport:
            return await create_completion(request, transport)

    try:
        response = _run_async(_complete())
    except RequestValidationError as e:
        console.print(f"[bold red]{e.message}[/bold red]")
        raise typer.Exit(code=1)
    except GptrustError as e:
        console.print(f"[bold red]{e.message}[/bold red]")
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(response.model_dump_json(indent=2))
        return

    table = Table(title=f"{response.model} ({response.id})")
    table.add_column("#", style="cyan")
    table.add_column("Finish", style="green")
    table.add_column("Text")

    for choice in response.choices:
        table.add_row(str(choice.index), choice.finish_reason or "-", choice.text)

    console.print(table)
    usage = response.usage
    console.print(
        f"[dim]Tokens: {usage.prompt_tokens} prompt + {usage.completion_tokens} completion"
        f" = {usage.total_tokens}[/dim]"
    )


def main():
    cli_app()


if __name__ == "__main__":
    main()
