"""Append a marker line to data.log in the current directory."""

import asyncio

import async_file as fs


async def main() -> None:
    await fs.write_text_file("data.log", "\nPASSED!\n", flags=fs.OpenFlags.APPEND)


if __name__ == "__main__":
    asyncio.run(main())
