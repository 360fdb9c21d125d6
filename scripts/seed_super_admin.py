#!/usr/bin/env python3
"""Create the super admin account from BOOTSTRAP__* settings.

Safe to run repeatedly: an existing super admin is left untouched.
"""

import asyncio
import sys

import logfire

from alumni.application.usecase.admin import SeedSuperAdminUseCase
from alumni.config import Settings
from alumni.util.di.container import create_container
from alumni.util.observability import configure_logfire


async def seed() -> bool:
    """Run the seed use case in its own request scope."""
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(SeedSuperAdminUseCase)
            result = await use_case.execute()
    finally:
        await container.close()

    logfire.info(
        "Super admin seed finished",
        username=result.account.username,
        created=result.created,
    )
    return result.created


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    try:
        asyncio.run(seed())
        return 0
    except Exception as e:
        logfire.error(
            "Super admin seed failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
