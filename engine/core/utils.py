import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level="INFO"):
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def log_search_info(logger, player, slot, score, nodes, elapsed):
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    slot_str = str(slot) if slot is not None else "-"
    logger.info("info player %s bestslot %s score %s nodes %d nps %d time %d",
                player, slot_str, score, nodes, nps, int(elapsed * 1000))
