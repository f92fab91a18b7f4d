from __future__ import annotations

import asyncio
import os
import sys

from docsmoke import ProviderKey, RizaExecutor, SnippetRunner, parse_file


class MissingEnvVarError(RuntimeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Set {name} before running this example.")


def require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise MissingEnvVarError(name)
    return value


def skip_marked(code: str) -> bool:
    first = next((line.strip() for line in code.splitlines() if line.strip()), "")
    return first.startswith("# test:skip")


async def main(path: str) -> int:
    key = ProviderKey("cohere", "COHERE_API_KEY", require_env("COHERE_API_KEY"))
    runner = SnippetRunner(
        RizaExecutor(),
        key,
        language="python",
        runtime_revision_id=require_env("RIZA_RUNTIME_REVISION_ID_PYTHON"),
        delay=0.5,
        should_skip=skip_marked,
    )
    tally = await runner.run(parse_file(path, "python"))
    print("total:", tally.total)
    return 1 if tally.failed else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "README.md")))
