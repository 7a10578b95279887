import sys

from loguru import logger

from config.settings import settings


def setup_logger(
    *,
    json_logs: bool | None = None,
    level: str | None = None,
    log_dir: str | None = None,
) -> None:
    """Configure loguru for the application.

    Unset arguments fall back to settings (LOG_LEVEL, JSON_LOGS, LOG_DIR in env or .env).
    File always captures DEBUG, which is where per-account decode failures land.
    """
    if json_logs is None:
        json_logs = settings.json_logs
    console_level = (level or settings.log_level).upper()
    log_dir = log_dir or settings.log_dir
    logger.remove()

    if json_logs:
        logger.add(sys.stdout, serialize=True, level=console_level)
    else:
        logger.add(
            sys.stdout,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
                "<level>{message}</level>"
            ),
            level=console_level,
            colorize=True,
        )

    logger.add(
        f"{log_dir}/decoder_{{time:YYYY-MM-DD}}.log",
        rotation="50 MB",
        retention="3 days",
        compression="gz",
        level="DEBUG",
        serialize=json_logs,
    )
