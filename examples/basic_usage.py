#!/usr/bin/env python3
"""Basic usage example"""

from prettylogger import LoggerBuilder, Severity, Verbosity, Color

def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_verbosity(Verbosity.ALL)
        .with_log_format("%d %h %m")
        .with_datetime_format("%H:%M:%S")
        .with_header(Severity.INFO, "info", Color.CYAN)
        .with_file("example.log", max_buffer_size=16)
        .build())

    # Log messages
    logger.debug("This is debug")
    logger.info("Application started")
    logger.warning("This is warning")
    logger.error("This is error")
    logger.fatal("This is fatal")

    # Pause file writes while another process rotates the file
    logger.output.file_output.lock_file()
    logger.output.file_output.unlock_file()

    # Save the configuration for later
    logger.save_template("example_template.json")

    # Flush and close
    logger.flush()
    logger.close()

if __name__ == "__main__":
    main()
