"""CLI entry point."""

from __future__ import annotations

import logging
import random
from typing import Optional

import typer

from unocore.config import Settings

app = typer.Typer(help="UNO rules engine: play a game or dump a freshly dealt one")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _parse_agents(agent_specs: str, seed: Optional[int]) -> list["AgentProtocol"]:
    from unocore.agents import AgentProtocol, HumanAgent, RandomAgent

    parts = [s.strip().lower() for s in agent_specs.split(",") if s.strip()]
    rng = random.Random(seed)
    agents: list[AgentProtocol] = []
    for i, kind in enumerate(parts):
        if kind == "random":
            agents.append(RandomAgent(name=f"Random_{i}", rng=random.Random(rng.randrange(2**31))))
        elif kind == "human":
            agents.append(HumanAgent(name=f"Human_{i}"))
        else:
            raise typer.BadParameter(f"Unknown agent type: {kind}. Use 'random' or 'human'.")
    return agents


@app.command()
def play(
    agents: Optional[str] = typer.Option(
        None,
        "--agents",
        "-a",
        help="Comma-separated agent types: random or human (e.g. human,random,random). "
        "Defaults to UNOCORE_PLAYERS random agents.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    max_turns: Optional[int] = typer.Option(None, "--max-turns", help="Stop after this many turns"),
) -> None:
    """Run a single UNO game."""
    from unocore.engine import UnoError
    from unocore.orchestration.game_runner import GameRunner

    settings = Settings.from_env()
    _setup_logging(settings.log_level)
    seed = seed if seed is not None else settings.seed
    specs = agents if agents is not None else ",".join(["random"] * settings.players)

    agent_list = _parse_agents(specs, seed)
    runner = GameRunner(
        agent_list,
        seed=seed,
        max_turns=max_turns if max_turns is not None else settings.max_turns,
    )
    try:
        result = runner.run()
    except (UnoError, ValueError) as e:
        raise typer.BadParameter(str(e)) from e

    for event in result.state.history:
        typer.echo(event)
    if result.winner is None:
        typer.echo("Winner: None (draw)")
    else:
        typer.echo(f"Winner: player {result.winner} ({result.agent_names[result.winner]})")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def snapshot(
    players: Optional[int] = typer.Option(None, "--players", "-p", help="Number of players (1-4)"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    indent: int = typer.Option(2, "--indent", help="JSON indent"),
) -> None:
    """Deal a new game and print its JSON snapshot."""
    from unocore.engine import GameState, UnoError

    settings = Settings.from_env()
    _setup_logging(settings.log_level)
    try:
        state = GameState.new(
            players if players is not None else settings.players,
            seed=seed if seed is not None else settings.seed,
        )
    except (UnoError, ValueError) as e:
        raise typer.BadParameter(str(e)) from e
    typer.echo(state.to_json(indent=indent))


if __name__ == "__main__":
    app()
