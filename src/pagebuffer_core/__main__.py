"""
Entry point for running PageBuffer as a module.
This allows walking a paged endpoint with `python -m pagebuffer_core`.
"""

import asyncio

import hydra
from loguru import logger
from omegaconf import DictConfig

from .services import BufferCacheService, get_logging_service


async def run(cfg: DictConfig) -> None:
    """Build the cache from configuration and walk the configured positions.

    Args:
        cfg: Configuration from Hydra
    """
    logging_service = get_logging_service()
    await logging_service.initialize(cfg)

    walk_cfg = cfg.get("walk", {}) or {}
    service = BufferCacheService(drain_timeout=walk_cfg.get("drain_timeout"))
    if not await service.initialize(cfg):
        return

    try:
        positions = list(walk_cfg.get("positions", []) or [])
        windows = await service.walk(positions)
        for position, window in zip(positions, windows):
            logger.info(f"Position {position}: {window}")
        logger.info(f"Stats: {service.get_stats()}")
    finally:
        await service.shutdown()


@hydra.main(version_base=None, config_path="../../config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Run PageBuffer with Hydra configuration.

    Args:
        cfg: Configuration from Hydra
    """
    asyncio.run(run(cfg))


if __name__ == "__main__":
    main()
