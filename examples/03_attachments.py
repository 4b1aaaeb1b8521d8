"""
Attachments - Download every attachment of the latest messages
"""
import asyncio
from pathlib import Path

from librus import LibrusClient, ApiError


async def main():
    target = Path("attachments")
    target.mkdir(exist_ok=True)

    async with await LibrusClient.from_env() as librus:
        for message in await librus.inbox_messages(limit=20):
            if not message.is_any_file_attached:
                continue

            detail = await librus.message(message.message_id)
            for item in detail.attachments:
                try:
                    data = await librus.attachment(item.id, message.message_id)
                except ApiError as e:
                    print(f"Skipping {item.name}: {e}")
                    continue
                (target / item.name).write_bytes(data)
                print(f"Saved {item.name} ({len(data):,} bytes)")


if __name__ == "__main__":
    asyncio.run(main())
