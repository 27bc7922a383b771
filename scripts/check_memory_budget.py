#!/usr/bin/env python3
"""
Check memory budget of a long struggle.

The board only materializes its contested window, so process memory should
stay flat however many generations are played.
"""

import sys
import os
import logging

import psutil

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lifestruggle.core.tile import Tile
from lifestruggle.game import StruggleConfig, run_struggle
from lifestruggle.patterns.shapes import lwss_at

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def check_memory_budget(threshold_mb=200, generations=2000, tile_size=40):
    """Play a spaceship against an empty tile and compare RSS growth to the budget."""
    process = psutil.Process(os.getpid())
    memory_before = process.memory_info().rss / 1024 / 1024  # MB

    config = StruggleConfig(generations=generations, log_interval=500)
    result = run_struggle(lwss_at(Tile(tile_size)), Tile(tile_size), config)

    memory_after = process.memory_info().rss / 1024 / 1024  # MB
    memory_used = memory_after - memory_before

    logger.info(f"Generations: {result.generations}, window: {result.board.extent()}")
    logger.info(f"Memory growth: {memory_used:.2f}MB (budget {threshold_mb}MB)")

    if memory_used < threshold_mb:
        logger.info("✓ Memory usage within budget")
        return 0
    else:
        logger.error(f"✗ Memory growth {memory_used:.2f}MB exceeds budget {threshold_mb}MB")
        return 1


if __name__ == "__main__":
    sys.exit(check_memory_budget())
