#!/usr/bin/env python3
"""
Life Struggle Demonstration Script

Plays a lightweight spaceship against a pair of gliders on 40x40 tiles and
reports how the score changes with the number of generations played.
"""

import sys
import os
import json
import logging
from pathlib import Path

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

from lifestruggle.core.tile import Tile
from lifestruggle.core.render import render_text
from lifestruggle.game import StruggleConfig, run_struggle
from lifestruggle.patterns.shapes import glider_at, lwss_at


def build_players(tile_size=40):
    """Spaceship for A, two gliders for B (both designed facing +x)."""
    tile_a = lwss_at(Tile(tile_size))

    tile_b = Tile(tile_size)
    glider_at(tile_b, 8, 0)
    glider_at(tile_b, 8, 10)
    # Gliders head -x+y as drawn; mirror them to head +x+y
    tile_b = tile_b.mirror()

    return tile_a, tile_b


def run_struggle_demo(tile_size=40, checkpoints=(100, 500, 2000), image_dir="logs"):
    """Run the demo and return the score and image path at each checkpoint."""
    logger.info("=== LIFE STRUGGLE DEMONSTRATION ===")
    logger.info(f"Tile size: {tile_size}x{tile_size}")

    tile_a, tile_b = build_players(tile_size)
    Path(image_dir).mkdir(exist_ok=True)

    scores = {}
    images = {}
    for generations in checkpoints:
        image_path = Path(image_dir) / f"life_{generations}.png"
        images[generations] = str(image_path)
        config = StruggleConfig(generations=generations, image_path=image_path)
        result = run_struggle(tile_a, tile_b, config)
        scores[generations] = result.score
        logger.info(f"After {generations} generations: {result.score[0]} to {result.score[1]} ({result.outcome})")

        if result.board is not None and tile_size <= 16:
            logger.info("\n" + render_text(result.board))

    results = {
        "tile_size": tile_size,
        "scores": {str(generations): list(score) for generations, score in scores.items()},
        "images": {str(generations): path for generations, path in images.items()},
    }

    logger.info("✅ DEMONSTRATION COMPLETE")
    return results


def save_demo_log(results, log_file="logs/struggle_demo.json"):
    """Save demonstration results to a JSON file."""
    Path("logs").mkdir(exist_ok=True)

    with open(log_file, 'w') as f:
        json.dump(results, f, indent=2)

    logger.info(f"Demonstration log saved to: {log_file}")


if __name__ == "__main__":
    try:
        results = run_struggle_demo()
        save_demo_log(results)
    except Exception as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)
