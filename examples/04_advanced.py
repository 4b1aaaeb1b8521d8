"""
Advanced - Custom configuration, builder, notices and error handling
"""
import asyncio
import logging
from datetime import date, timedelta

from librus import (
    APIConfig,
    AuthenticationError,
    LibrusClient,
    TimeoutConfig,
    TransportError,
    setup_logging,
)


async def main():
    logging.basicConfig(level=logging.INFO)
    setup_logging(logging.DEBUG)

    config = APIConfig(
        timeout=TimeoutConfig(total=30, connect=10, sock_read=20),
        user_agent="librus-example/1.0",
    )

    try:
        librus = await (LibrusClient.builder()
            .username("1234567u")
            .password("secret")
            .config(config)
            .build())
    except AuthenticationError as e:
        print(f"Login rejected: {e}")
        return
    except TransportError as e:
        print(f"Librus unreachable: {e}")
        return

    async with librus:
        notices = await librus.school_notices()
        for notice in notices.school_notices[:3]:
            print(f"{notice.subject}: {notice.text[:80]}")

        today = date.today()
        monday = today - timedelta(days=today.weekday())
        timetable = await librus.timetable(monday)
        for entry in timetable.lessons_on(monday.isoformat()):
            print(f"  {entry.hour_from}-{entry.hour_to} subject {entry.subject.id if entry.subject else '?'}")


if __name__ == "__main__":
    asyncio.run(main())
