"""
Messages - Unread counts, inbox and message bodies
"""
import asyncio
from librus import LibrusClient


async def main():
    async with await LibrusClient.from_env() as librus:

        # First messaging call warms up the messaging backend
        counts = await librus.unread_counts()
        print(f"Unread: {counts.inbox} messages, {counts.notes} notes")

        for message in await librus.inbox_messages(page=1, limit=5):
            print(f"\n[{message.send_date}] {message.sender_name}: {message.topic}")
            detail = await librus.message(message.message_id)
            print(detail.text or "(body is not base64 text)")
            for item in detail.attachments:
                print(f"  attachment {item.id}: {item.name}")


if __name__ == "__main__":
    asyncio.run(main())
