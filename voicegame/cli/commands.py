"""CLI commands for playing and inspecting the TicTacToe engine."""

import json

import typer
from rich.console import Console
from rich.table import Table

from voicegame import __version__
from voicegame.agent.tools import MakeMoveTool
from voicegame.config import settings
from voicegame.game.rules import EMPTY, Board, Side
from voicegame.game.search import MinimaxSearch
from voicegame.game.turns import TicTacToeGame, status_message
from voicegame.utils.logging import configure_logging

app = typer.Typer(
    name="voicegame",
    help="TicTacToe engine behind the voice agent's makeMove tool",
)

console = Console()


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help="Log level (defaults to VOICEGAME_LOG_LEVEL)"
    ),
) -> None:
    configure_logging(log_level or settings.log_level)


def _render_board(board: Board) -> Table:
    """Board as a 3x3 table; empty cells show their 1-9 number."""
    winning = set(board.winning_line() or ())
    table = Table(show_header=False, show_lines=True)
    for _ in range(3):
        table.add_column(justify="center", width=3)

    for row in range(3):
        cells = []
        for col in range(3):
            index = row * 3 + col
            cell = board[index]
            if cell == EMPTY:
                cells.append(f"[dim]{index + 1}[/dim]")
            elif index in winning:
                cells.append(f"[bold green]{cell}[/bold green]")
            else:
                cells.append(f"[bold]{cell}[/bold]")
        table.add_row(*cells)
    return table


@app.command()
def play() -> None:
    """Play against the engine in the terminal. You are X."""
    game = TicTacToeGame()
    console.print(_render_board(game.board))

    while game.result is None:
        position = typer.prompt("Your move (1-9, q to quit)")
        if position.strip().lower() in {"q", "quit"}:
            console.print("Bye!")
            return

        outcome = game.play_human_move(position)
        if not outcome.accepted:
            console.print(f"[yellow]Can't play {position!r} ({outcome.reason})[/yellow]")
            continue

        if outcome.reply_move is not None:
            console.print(f"Computer plays {outcome.reply_move + 1}")
        console.print(_render_board(game.board))
        console.print(status_message(outcome.result))


@app.command()
def solve(
    board: str = typer.Argument(..., help="9 cells, e.g. 'X...O....' ('.' is empty)"),
    side: str = typer.Option("O", "--side", "-s", help="Side to move: X or O"),
) -> None:
    """Show the best move for a position."""
    try:
        parsed = Board.from_string(board)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    if side.upper() not in {"X", "O"}:
        raise typer.BadParameter(f"Invalid side: {side}")

    result = MinimaxSearch().best_move(parsed, Side(side.upper()))
    console.print(_render_board(parsed))
    if not result.has_move:
        console.print(f"No move available ({status_message(parsed.evaluate())})")
        return
    console.print(f"Best move for {side.upper()}: {result.index + 1} (score {result.score:+d})")


@app.command("tool-schema")
def tool_schema() -> None:
    """Print the function schema of the makeMove tool."""
    tool = MakeMoveTool(TicTacToeGame())
    console.print_json(json.dumps(tool.to_schema()))


@app.command()
def version() -> None:
    """Show the installed version."""
    console.print(f"voicegame {__version__}")
