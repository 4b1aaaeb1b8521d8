"""
Basic usage - Login and read grades
"""
import asyncio
from librus import LibrusClient


async def main():
    # Credentials come from LIBRUS_USERNAME / LIBRUS_PASSWORD
    async with await LibrusClient.from_env() as librus:

        me = await librus.me()
        print(f"Connected as {me.me.user.first_name} {me.me.user.last_name}")

        grades = await librus.grades()
        print(f"\nGrades ({len(grades.grades)}):")
        for grade in grades.grades:
            print(f"  {grade.date}  {grade.grade:>3}  subject {grade.subject.id}")


if __name__ == "__main__":
    asyncio.run(main())
