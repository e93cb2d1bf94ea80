# -*- coding: utf-8 -*-
"""
Play random games with the engine and report the reached tiles.
"""
import logging
from collections import Counter
from typing import Any, Dict, Optional, Tuple

from numpy import mean
from numpy.random import default_rng
from tqdm import trange

from game2048.addons.config import BOARD_SIZE
from game2048.addons.types import Direction, GameStatus
from game2048.core.gamemove import is_legal, legal_actions, max_tile
from game2048.envs import GameEngine

_logger = logging.getLogger(__name__)


def play_game(engine: GameEngine, rng, max_moves: Optional[int] = None, legal_only: bool = False) -> Tuple[int, int]:
    """
    Play one game with random directions.

    Parameters
    ----------
    engine : GameEngine
        A started engine.
    rng : Generator
        Random source for the chosen directions.
    max_moves : int, optional
        Stop after this many moves even if the game is still running.
    legal_only : bool, optional
        Draw only among the directions that change the grid (default is False, all four directions).

    Returns
    -------
    Tuple[int, int]
        The number of moves played and how many of them left the tiles in place.
    """
    moves, noops = 0, 0
    while engine.get_status() is GameStatus.PLAYING:
        if max_moves is not None and moves >= max_moves:
            break

        candidates = legal_actions(engine.get_state()) if legal_only else []
        directions = candidates or list(Direction)
        direction = directions[int(rng.integers(len(directions)))]

        # ##>: The engine spawns even on a no-op move, so count them before moving.
        if not is_legal(engine.get_state(), direction):
            noops += 1

        engine.move(direction)
        moves += 1
    return moves, noops


def evaluate(
    games: int = 10,
    seed: Optional[int] = None,
    size: int = BOARD_SIZE,
    max_moves: Optional[int] = None,
    legal_only: bool = False,
) -> Dict[str, Any]:
    """
    Play random games and collect statistics.

    Parameters
    ----------
    games : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed of both the direction and the spawn random sources.
    size : int, optional
        Side of the grid (default is 4).
    max_moves : int, optional
        Cap on the number of moves per game.
    legal_only : bool, optional
        Draw only among legal directions.

    Returns
    -------
    Dict[str, Any]
        ``max_tiles`` (max tile -> frequency), ``statuses`` (status -> frequency), ``mean_score``,
        ``mean_moves`` and ``mean_noop_moves``.
    """
    rng = default_rng(seed)
    engine = GameEngine(initial_state=[[0] * size for _ in range(size)], rng=rng)

    tiles, statuses, scores, lengths, noops = [], [], [], [], []

    with trange(games) as period:
        for num in period:
            # ##: First game starts from Idle, the others restart.
            if engine.get_status() is GameStatus.IDLE:
                engine.start()
            else:
                engine.restart()

            moves, wasted = play_game(engine, rng, max_moves=max_moves, legal_only=legal_only)

            tiles.append(max_tile(engine.get_state()))
            statuses.append(engine.get_status().value)
            scores.append(engine.get_score())
            lengths.append(moves)
            noops.append(wasted)

            period.set_description(f'Evaluation: {num + 1}')
            period.set_postfix(score=engine.get_score(), max=tiles[-1])
            _logger.debug(
                'Game %d finished: %s, score %d, %d moves (%d no-op)', num + 1, statuses[-1], scores[-1], moves, wasted
            )

    return {
        'max_tiles': dict(Counter(tiles)),
        'statuses': dict(Counter(statuses)),
        'mean_score': float(mean(scores)) if scores else 0.0,
        'mean_moves': float(mean(lengths)) if lengths else 0.0,
        'mean_noop_moves': float(mean(noops)) if noops else 0.0,
    }


if __name__ == '__main__':
    from argparse import ArgumentParser

    parser = ArgumentParser(description='Play random 2048 games')
    parser.add_argument('--games', type=int, default=10)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--size', type=int, default=BOARD_SIZE)
    parser.add_argument('--max-moves', type=int, default=None)
    parser.add_argument('--legal-only', action='store_true')
    parser.add_argument('--log-level', type=str, default='WARNING')
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(name)s %(levelname)s %(message)s')

    result = evaluate(
        games=args.games, seed=args.seed, size=args.size, max_moves=args.max_moves, legal_only=args.legal_only
    )
    print(f"Random play over {args.games} game(s): {result}")
