"""Basic example of using tmpsweep."""

import os

from tmpsweep import NonEmptyDirectoryError
from tmpsweep import sync as tmp


def main():
    """Run basic examples."""
    # Example 1: A temporary file, removed on dispose()
    print("Example 1: Temporary File")
    print("-" * 50)
    report = tmp.file(prefix="report", postfix=".csv")
    with open(report.name, "w") as f:
        f.write("a,b\n1,2\n")
    print(f"Created: {report.name}")
    report.dispose()
    print(f"Exists after dispose: {os.path.exists(report.name)}\n")

    # Example 2: A directory that is removed recursively
    print("Example 2: Force Cleaned Directory")
    print("-" * 50)
    with tmp.dir(force_clean=True) as workdir:
        os.makedirs(os.path.join(workdir.name, "nested", "deeper"))
        print(f"Working in: {workdir.name}")
    print(f"Exists after with block: {os.path.exists(workdir.name)}\n")

    # Example 3: Non-empty directories need force_clean
    print("Example 3: Non-empty Directory")
    print("-" * 50)
    parent = tmp.dir()
    child = tmp.file(dir=os.path.basename(parent.name))
    try:
        parent.dispose()
    except NonEmptyDirectoryError as e:
        print(f"Refused: {e}")
    child.dispose()
    parent.dispose()
    print(f"Parent removed after child: {not os.path.exists(parent.name)}\n")

    # Example 4: Keep a file past the end of the process
    print("Example 4: Kept File")
    print("-" * 50)
    kept = tmp.file(name="tmpsweep-example-kept.txt", keep=True)
    kept.dispose()
    print(f"Still there: {os.path.exists(kept.name)} ({kept.name})")
    os.unlink(kept.name)


if __name__ == "__main__":
    main()
