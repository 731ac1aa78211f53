#!/usr/bin/env python3
"""
ShopWave Backend Runner
=======================

Usage:
    python run_app.py                    # Development mode with auto-reload (default)
    python run_app.py --mode prod        # Production mode, multiple workers
    python run_app.py --port 8001        # Custom port
    python run_app.py --host 127.0.0.1   # Custom host
    python run_app.py --seed             # Seed a sample catalog on startup
"""

import argparse
import os
import sys


def run_app(host: str, port: int, reload: bool, workers: int) -> None:
    """Run the FastAPI application under uvicorn"""
    import uvicorn

    print(f"Starting ShopWave API on {host}:{port}")
    print(f"API Docs: http://{host}:{port}/api/docs")

    uvicorn.run(
        "shopwave.main:app",
        host=host,
        port=port,
        reload=reload,
        workers=None if reload else workers,
        log_level="info",
    )


def main() -> int:
    parser = argparse.ArgumentParser(
        description="ShopWave Backend Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        choices=["dev", "prod"],
        default="dev",
        help="Server mode (default: dev)"
    )
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to (default: 8000)")
    parser.add_argument("--workers", type=int, default=4, help="Worker processes in prod mode")
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    parser.add_argument("--seed", action="store_true", help="Seed sample products when the catalog is empty")

    args = parser.parse_args()

    if args.seed:
        # Read by Settings when the app module is imported
        os.environ["SEED_SAMPLE_DATA"] = "true"

    reload = not args.no_reload and args.mode != "prod"
    run_app(args.host, args.port, reload, args.workers)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nServer stopped by user")
        sys.exit(0)
