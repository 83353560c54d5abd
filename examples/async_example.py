"""Async example of using tmpsweep."""

import asyncio
import os

from tmpsweep import aio


async def main() -> None:
    """Run async examples."""
    # Example 1: Basic async creation
    print("Example 1: Basic Async File")
    print("-" * 50)
    result = await aio.file(postfix=".json")
    print(f"Created: {result.name}")
    await result.dispose()
    print(f"Exists after dispose: {os.path.exists(result.name)}\n")

    # Example 2: Many concurrent directories
    print("Example 2: Concurrent Directories")
    print("-" * 50)
    directories = await asyncio.gather(*(aio.dir(prefix="worker") for _ in range(5)))
    for directory in directories:
        print(f"  {directory.name}")
    await asyncio.gather(*(directory.dispose() for directory in directories))
    print()

    # Example 3: Async context manager
    print("Example 3: Async Context Manager")
    print("-" * 50)
    async with await aio.dir(force_clean=True) as workdir:
        with open(os.path.join(workdir.name, "data.bin"), "wb") as f:
            f.write(b"\x00" * 1024)
    print(f"Exists after async with: {os.path.exists(workdir.name)}")


if __name__ == "__main__":
    asyncio.run(main())
