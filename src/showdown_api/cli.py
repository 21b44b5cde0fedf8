"""Command-line interface for evaluating and comparing hands."""

import click

from showdown.core.errors import ShowdownError
from showdown.evaluation.evaluator import evaluate
from showdown.evaluation.hand_description import describe
from showdown.game.showdown import resolve_showdown
from .config import get_config
from .logging_setup import setup_logging


def _split_hand(hand: str) -> list[str]:
    return [part for part in hand.replace(",", " ").split() if part]


@click.group()
@click.option('--config', 'config_name', default=None, help='Configuration to use')
@click.pass_context
def cli(ctx, config_name):
    """Five card poker hand evaluator."""
    config_class = get_config(config_name)
    setup_logging(config_class.LOG_LEVEL)
    ctx.obj = {"reject_degenerate": config_class.REJECT_DEGENERATE_HANDS}


@cli.command(name='evaluate')
@click.argument('cards', nargs=-1, required=True)
@click.pass_obj
def evaluate_command(obj, cards):
    """Evaluate one hand, e.g. `evaluate AH KH QH JH 10H`."""
    try:
        result = evaluate(cards, reject_degenerate=obj["reject_degenerate"])
    except ShowdownError as e:
        raise click.ClickException(str(e))

    click.echo(f"{result.combination}: {describe(result)} (score {result.score})")


@cli.command()
@click.argument('player1_hand')
@click.argument('player2_hand')
@click.pass_obj
def compare(obj, player1_hand, player2_hand):
    """Compare two hands given as quoted card lists."""
    try:
        showdown = resolve_showdown(
            _split_hand(player1_hand),
            _split_hand(player2_hand),
            reject_degenerate=obj["reject_degenerate"],
        )
    except ShowdownError as e:
        raise click.ClickException(str(e))

    click.echo(showdown.message)
    click.echo(f"  Player 1: {describe(showdown.player1)}")
    click.echo(f"  Player 2: {describe(showdown.player2)}")


if __name__ == '__main__':
    cli()
