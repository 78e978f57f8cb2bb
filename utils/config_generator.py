#!/usr/bin/env python3
"""
Config Generator for the IT Glossary API

Generates config.py from environment variables, so deployments can keep
the content-API key out of the repository.

Usage:
    # Reads CMS_* / REQUEST_* / LOG_* variables (VAR_ prefix wins)
    python3 utils/config_generator.py

    # With custom output path
    python3 utils/config_generator.py --output /path/to/config.py

    # Dry run (print config without writing)
    python3 utils/config_generator.py --dry-run
"""

import os
import re
import argparse
from typing import Any, Callable, List, Tuple, Dict


# =============================================================================
# Environment Variable Helpers
# =============================================================================

# Placeholder values that represent "empty" (use these in CI variables when you want an empty value)
EMPTY_PLACEHOLDERS = ('__EMPTY__', '__NULL__', 'null', 'none', 'NULL', 'NONE')


def get_env(name: str, default: str = '') -> str:
    """Get environment variable with default value.

    ``VAR_<name>`` is tried first, then ``<name>``.  Placeholders from
    ``EMPTY_PLACEHOLDERS`` yield an empty string.
    """
    val = os.environ.get(f'VAR_{name}', None)
    if val is None:
        val = os.environ.get(name, default)

    if val in EMPTY_PLACEHOLDERS:
        return ''
    return val or default


def get_env_int(name: str, default: int) -> int:
    val = get_env(name, str(default))
    if val == '':
        return default
    try:
        return int(val)
    except (ValueError, TypeError):
        return default


def get_env_float(name: str, default: float) -> float:
    val = get_env(name, str(default))
    if val == '':
        return default
    try:
        return float(val)
    except (ValueError, TypeError):
        return default


def format_python_value(value: Any) -> str:
    """Format Python value for config.py output."""
    if isinstance(value, bool):
        return 'True' if value else 'False'
    if isinstance(value, str):
        return repr(value)
    if value is None:
        return 'None'
    return str(value)


# =============================================================================
# Configuration Mapping
# =============================================================================

def get_config_map() -> List[Tuple[str, str, Callable, Any, str]]:
    """Get the configuration mapping.

    Configuration mapping format:
    (config_name, env_name, type_func, default_value, section)
    """
    return [
        # Content API
        ('CMS_SERVICE_DOMAIN', 'CMS_SERVICE_DOMAIN', get_env, '', 'CONTENT API CONFIGURATION'),
        ('CMS_API_KEY', 'CMS_API_KEY', get_env, '', 'CONTENT API CONFIGURATION'),
        ('CMS_BASE_URL', 'CMS_BASE_URL', get_env, '', 'CONTENT API CONFIGURATION'),
        # HTTP client
        ('REQUEST_TIMEOUT', 'REQUEST_TIMEOUT', get_env_float, 10.0, 'REQUEST CONFIGURATION'),
        ('REQUEST_MAX_RETRIES', 'REQUEST_MAX_RETRIES', get_env_int, 3, 'REQUEST CONFIGURATION'),
        ('REQUEST_RETRY_BACKOFF', 'REQUEST_RETRY_BACKOFF', get_env_float, 1.0, 'REQUEST CONFIGURATION'),
        # Logging
        ('LOG_LEVEL', 'LOG_LEVEL', get_env, 'INFO', 'LOGGING CONFIGURATION'),
        ('LOG_FILE', 'LOG_FILE', get_env, 'logs/glossary.log', 'LOGGING CONFIGURATION'),
    ]


# =============================================================================
# Config Generation
# =============================================================================

def generate_config_content() -> str:
    """Generate config.py content from environment variables."""
    sections: Dict[str, List[Tuple[str, Any]]] = {}
    for config_name, env_name, type_func, default, section in get_config_map():
        sections.setdefault(section, []).append((config_name, type_func(env_name, default)))

    config_lines = [
        '# IT Glossary - Configuration File',
        '# Auto-generated from environment variables',
        '',
    ]
    for section_name, configs in sections.items():
        config_lines.append('# ' + '=' * 75)
        config_lines.append(f'# {section_name}')
        config_lines.append('# ' + '=' * 75)
        config_lines.append('')
        for config_name, value in configs:
            config_lines.append(f'{config_name} = {format_python_value(value)}')
        config_lines.append('')

    return '\n'.join(config_lines)


def mask_sensitive_values(content: str) -> str:
    """Mask API keys in config content for safe display."""
    masked = re.sub(r"(API_KEY\s*=\s*')[^']*(')", r"\1***MASKED***\2", content)
    masked = re.sub(r'(API_KEY\s*=\s*")[^"]*(")', r"\1***MASKED***\2", masked)
    return masked


def write_config(output_path: str = 'config.py', dry_run: bool = False, show_masked: bool = True) -> bool:
    """Write config.py file.

    Returns:
        True if successful, False otherwise
    """
    try:
        config_content = generate_config_content()

        if not dry_run:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(config_content)
            print(f"✓ Generated {output_path}")
        else:
            print("✓ Dry run - config.py would be generated with the following content:")

        if show_masked:
            print("\nConfig file contents (sensitive values masked):")
            print(mask_sensitive_values(config_content))

        return True

    except OSError as e:
        print(f"✗ Failed to generate config.py: {e}")
        return False


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Generate config.py from environment variables')
    parser.add_argument('--output', '-o', type=str, default='config.py',
                        help='Output path for config.py (default: config.py)')
    parser.add_argument('--dry-run', action='store_true',
                        help='Print config without writing to file')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Do not print masked config content')
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)
    success = write_config(
        output_path=args.output,
        dry_run=args.dry_run,
        show_masked=not args.quiet,
    )
    return 0 if success else 1


if __name__ == '__main__':
    exit(main())
