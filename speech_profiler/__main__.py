"""Package entry point for ``python -m speech_profiler``.

WHY: Users run the analyzer as ``python -m speech_profiler talk.json``
for CLI mode, or ``python -m speech_profiler --serve`` to start the
HTTP API.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
FastAPI app under uvicorn. Otherwise, delegates to the CLI's main().

RULES:
- ``--serve`` starts the HTTP API
- Without ``--serve``, falls through to the CLI
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from speech_profiler.server.app import run_api
        run_api()
    else:
        from speech_profiler.cli import main
        main()
