#!/usr/bin/env python3
"""Basic usage example"""

import asyncio

from egon_log import LoggerBuilder, LogLevel


async def fetch_users():
    await asyncio.sleep(0.05)
    return [{"name": "alice", "role": "admin"}, {"name": "bob", "role": "dev"}]


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.DEBUG)
        .with_console(colored=True)
        .build())

    # Log messages
    logger.debug("This is debug", {"detail": True})
    logger.info("Application started")
    logger.warn("This is warning")
    logger.error("This is error")

    # Debug-only helpers
    logger.highlight("Look here", 42)

    # Timers
    logger.start_timer("startup")
    with logger.timed("block"):
        sum(range(100000))
    logger.end_timer("startup")

    users = asyncio.run(logger.time("fetch", fetch_users))
    logger.table(users)

    # Raising the threshold hides info and debug lines
    logger.set_level(LogLevel.WARN)
    logger.info("Not shown")
    logger.end_timer("never-started")


if __name__ == "__main__":
    main()
