"""
Ladder Logger Module

This module provides structured logging for API requests, server responses,
and engine events (dictionary loads, graph builds, load failures).
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config


class LadderLogger:
    """
    Centralized logging system for the word ladder engine.

    Features:
    - Request tracking with client identification
    - Server response logging
    - Engine lifecycle event logging
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO

        # Setup main logger
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main ladder logger with file handler."""
        logger = logging.getLogger('word_ladder')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # Create log file with date
        log_file = self._log_file()

        # File handler for detailed logs
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _log_file(self) -> Path:
        return self.log_dir / f"ladder_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _get_client_identity(self, request) -> Dict[str, str]:
        """Extract client identity information from request."""
        return {
            'client_ip': getattr(request, 'remote_addr', None) or 'unknown',
            'user_agent': str(getattr(request, 'user_agent', '') or '') or None
        }

    def _create_log_entry(self,
                         event_type: str,
                         action: str,
                         client_info: Dict[str, Optional[str]],
                         details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'client': client_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, request, action: str, **kwargs):
        """
        Log an incoming API request with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'find_path', 'ai_move', 'hint')
            **kwargs: Additional details to log
        """
        client_info = self._get_client_identity(request)

        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, client_info, details)
        self.logger.info(log_message)

    def log_server_response(self,
                           request,
                           action: str,
                           success: bool,
                           response_data: Dict[str, Any],
                           **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            **kwargs: Additional details to log
        """
        client_info = self._get_client_identity(request)
        safe_response = self._sanitize_response_data(response_data)

        details = {
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': safe_response,
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, client_info, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_engine_event(self, event: str, **kwargs):
        """
        Log engine lifecycle events.

        Args:
            event: Type of event (e.g., 'dictionary_loaded', 'graph_built', 'load_failed')
            **kwargs: Additional event details
        """
        client_info = {'client_ip': 'system', 'user_agent': None}
        log_message = self._create_log_entry('ENGINE_EVENT', event, client_info, dict(kwargs))

        if event.endswith('failed'):
            self.logger.error(log_message)
        else:
            self.logger.info(log_message)

    def log_error(self, request, error: Exception, action: str):
        """
        Log errors with full context.

        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
        """
        client_info = self._get_client_identity(request)

        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, client_info, details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Limit the size of large structures in response logs."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        # Neighbor lists and statistics can be large, keep only their size
        for key in ('neighbors', 'statistics', 'log_stats'):
            value = sanitized.get(key)
            if isinstance(value, (list, dict)):
                sanitized[key] = {'size': len(value)}

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'engine_events': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'ENGINE_EVENT' in line:
                            stats['engine_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
ladder_logger = LadderLogger(Config.LOG_DIR, Config.LOG_LEVEL)
