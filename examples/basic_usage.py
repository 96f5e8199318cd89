#!/usr/bin/env python3
"""Basic usage example"""

from simple_logger import LoggerBuilder, LogLevel
from simple_logger.injectors import ThreadInjector

def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_console(min_level=LogLevel.DEBUG, colored=True)
        .with_buffer(10)
        .with_injector(ThreadInjector())
        .with_timezone("Europe/Paris")
        .with_exception_handler(lambda e, handler: print(f"Handler error: {e}"))
        .build())

    # Log messages
    logger.debug("This is debug")
    logger.info("User {user} logged in", {"user": "bob", "ip": "127.0.0.1"})
    logger.notice("Cache warmed up")
    logger.warning("Disk usage at {percent}%", {"percent": 91})

    try:
        1 / 0
    except ZeroDivisionError as e:
        logger.error("Computation failed: {error}", {"error": e})

    logger.critical("This is critical")

    # Deliver buffered entries
    logger.flush()

if __name__ == "__main__":
    main()
