"""
Error handling utilities for Nebula Keybind Menu.

Two kinds of failure exist in this application: config problems, which are
never errors and fall back to the next source, and terminal problems, which
are fatal. The helpers here cover both with consistent logging.
"""

import logging
from typing import Optional, Any, Type

logger = logging.getLogger('NebulaKeybindMenu.ErrorHandler')


class TerminalError(RuntimeError):
    """Raised when the terminal cannot be taken over or restored."""


class ErrorHandlerUtil:
    """
    Utility class for standardized error handling patterns.

    Provides consistent methods for logging errors and raising exceptions
    with formatted messages, and for running operations with a fallback.
    """

    @staticmethod
    def log_and_raise(
        message: str,
        exception_class: Type[Exception] = RuntimeError,
        logger_instance: Optional[logging.Logger] = None,
        cause: Optional[Exception] = None,
        log_level: int = logging.ERROR
    ) -> None:
        """
        Log an error message and raise an exception.

        Args:
            message: Error message to log and include in exception
            exception_class: Type of exception to raise (default: RuntimeError)
            logger_instance: Logger to use (default: module logger)
            cause: Original exception to chain from (using 'from cause')
            log_level: Logging level to use (default: ERROR)

        Raises:
            The specified exception_class with the provided message
        """
        log_instance = logger_instance or logger
        log_instance.log(log_level, message)

        if cause:
            raise exception_class(message) from cause
        else:
            raise exception_class(message)

    @staticmethod
    def handle_with_fallback(
        operation_callable,
        fallback_value: Any = None,
        error_message: str = "Operation failed",
        logger_instance: Optional[logging.Logger] = None,
        log_level: int = logging.WARNING
    ) -> Any:
        """
        Execute an operation with automatic error handling and fallback.

        Args:
            operation_callable: Function/callable to execute
            fallback_value: Value to return if operation fails
            error_message: Message to log on failure
            logger_instance: Logger to use (default: module logger)
            log_level: Logging level for errors (default: WARNING)

        Returns:
            Result of operation_callable or fallback_value on failure
        """
        try:
            return operation_callable()
        except Exception as e:
            log_instance = logger_instance or logger
            log_instance.log(log_level, f"{error_message}: {str(e)}")
            return fallback_value

    @staticmethod
    def create_error_context(
        component_name: str,
        logger_name: Optional[str] = None
    ) -> 'ErrorContext':
        """
        Create an error context for a specific component.

        Args:
            component_name: Name of the component
            logger_name: Logger name to use (default: NebulaKeybindMenu.{component_name})

        Returns:
            ErrorContext instance for the component
        """
        if logger_name is None:
            logger_name = f'NebulaKeybindMenu.{component_name}'

        component_logger = logging.getLogger(logger_name)
        return ErrorContext(component_name, component_logger)


class ErrorContext:
    """
    Context object for component-specific error handling.

    Carries a pre-configured logger and component name so call sites
    don't repeat them.
    """

    def __init__(self, component_name: str, logger_instance: logging.Logger):
        self.component_name = component_name
        self.logger = logger_instance

    def log_and_raise(
        self,
        message: str,
        exception_class: Type[Exception] = RuntimeError,
        cause: Optional[Exception] = None
    ) -> None:
        """Log error and raise exception with component context."""
        ErrorHandlerUtil.log_and_raise(
            message=f"{self.component_name}: {message}",
            exception_class=exception_class,
            logger_instance=self.logger,
            cause=cause
        )

    def handle_with_fallback(
        self,
        operation_callable,
        fallback_value: Any = None,
        error_message: str = "Operation failed",
        log_level: int = logging.WARNING
    ) -> Any:
        """Execute operation with fallback using component logger."""
        return ErrorHandlerUtil.handle_with_fallback(
            operation_callable=operation_callable,
            fallback_value=fallback_value,
            error_message=error_message,
            logger_instance=self.logger,
            log_level=log_level
        )
