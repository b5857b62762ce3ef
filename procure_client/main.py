"""
Command line entry point for the procurement API client
"""

import asyncio
import logging
import os
import sys

from .application_context import ApplicationContext
from .config.settings import ClientSettings
from .errors.handling import log_error
from .errors.internal import ApiError, ConfigurationError, InternalError, SessionExpiredError
from .logging_config import LoggerConfigurator, error_tally
from .utils.helpers import format_amount


def health_check() -> int:
    """Resolve the settings and report the API base URL."""
    logging.info("🏥 Health check mode")
    try:
        settings = ClientSettings.from_env()
        base_url = settings.absolute_api_base_url
    except ConfigurationError as e:
        logging.error(f"❌ Health check failed: {e}")
        return 1
    logging.info(f"✅ Health check passed - API base URL {base_url} ({settings.environment})")
    return 0


async def run(settings: ClientSettings) -> int:
    """Log in with env credentials, if any, and log a dashboard summary."""
    username = os.environ.get("PROCURE_USERNAME")
    password = os.environ.get("PROCURE_PASSWORD")
    async with await ApplicationContext.create(settings) as ctx:
        logging.info(f"🚀 Procurement client ready on {ctx.client.transport.base_url}")
        if username and password:
            await ctx.auth.login({"username": username, "password": password})
            logging.info(f"🔑 Logged in as {username}")
        elif not ctx.is_authenticated():
            logging.warning("No session cookie and no PROCURE_USERNAME/PROCURE_PASSWORD set")
            return 1

        dashboard = await ctx.dashboard.get_dashboard()
        if isinstance(dashboard, dict):
            for key, value in sorted(dashboard.items()):
                if isinstance(value, (int, float, str)):
                    logging.info(f"📋 {key}: {value}")
        try:
            summary = await ctx.budgets.summary()
        except ApiError as e:
            if e.status != 403:
                raise
            logging.info("Budget totals are restricted to accounting")
        else:
            logging.info(
                f"💰 Budgets allocated={format_amount(summary.allocated)} "
                f"spent={format_amount(summary.spent)} available={format_amount(summary.available)}"
            )
        await ctx.auth.logout()
    return 0


def main() -> None:
    """Main function"""
    LoggerConfigurator().configure()

    if len(sys.argv) > 1 and sys.argv[1] == "--health-check":
        sys.exit(health_check())

    try:
        settings = ClientSettings.from_env()
        exit_code = asyncio.run(run(settings))
    except KeyboardInterrupt:
        logging.info("Application terminated by user")
        exit_code = 0
    except SessionExpiredError as e:
        log_error("Session expired, log in again", e)
        exit_code = 1
    except InternalError as e:
        log_error("Main application error", e)
        exit_code = 1
    error_tally.report()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
