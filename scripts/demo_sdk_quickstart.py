#!/usr/bin/env python3
"""Schlep-engine SDK demo: upload, train, deploy via the flat client surface.

Reads the API key from SCHLEP_API_KEY (or --api-key).

Usage:
    python3 scripts/demo_sdk_quickstart.py
    python3 scripts/demo_sdk_quickstart.py --base-url http://localhost:8080/v1
    python3 scripts/demo_sdk_quickstart.py --api-key my-secret --poll 5
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time

# Ensure repo root is on sys.path so schlep_sdk is importable.
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
REPO_ROOT = os.path.dirname(SCRIPT_DIR)
sys.path.insert(0, REPO_ROOT)

SAMPLE_RECORDS = [
    {"name": "Alice", "age": 30, "city": "New York"},
    {"name": "Bob", "age": 25, "city": "San Francisco"},
    {"name": "Charlie", "age": 35, "city": "Chicago"},
]


def main() -> int:
    parser = argparse.ArgumentParser(description="Schlep-engine SDK quickstart demo")
    parser.add_argument("--base-url", default=None)
    parser.add_argument("--api-key", default=None)
    parser.add_argument("--poll", type=int, default=3, help="Status polls before giving up")
    args = parser.parse_args()

    from schlep_sdk import ConfigError, SchlepClient, SchlepError
    from schlep_sdk.config import DEFAULT_BASE_URL

    base_url = args.base_url or os.environ.get("SCHLEP_BASE_URL") or DEFAULT_BASE_URL
    try:
        client = SchlepClient(args.api_key, base_url=base_url)
    except ConfigError as e:
        print(f"  {e}")
        print("  Set your API key: export SCHLEP_API_KEY=your-api-key-here")
        return 1

    print()
    print("=" * 64)
    print("  Schlep-engine Python SDK Quickstart")
    print("=" * 64)
    print()

    try:
        with client:
            # ── Step 1: Upload ───────────────────────────────────
            print("━━━ Step 1: upload() ━━━")
            up = client.upload(json.dumps({"records": SAMPLE_RECORDS}))
            print(f"  Job ID: {up.job_id}")
            print(f"  Status: {up.status}")
            print()

            # ── Step 2: Status ───────────────────────────────────
            print("━━━ Step 2: status() ━━━")
            st = client.status(up.job_id)
            for _ in range(args.poll):
                if st.status == "completed":
                    break
                print(f"  Status: {st.status} (progress={st.progress})")
                time.sleep(2)
                st = client.status(up.job_id)
            print(f"  Final status: {st.status}")
            print()

            # ── Step 3: Train ────────────────────────────────────
            print("━━━ Step 3: train() ━━━")
            tr = client.train({
                "model_type": "classification",
                "dataset_id": up.job_id,
                "parameters": {
                    "algorithm": "random_forest",
                    "target_column": "city",
                    "test_size": 0.2,
                },
            })
            print(f"  Training job ID: {tr.job_id}")
            print(f"  Status: {tr.status}")
            print()

            # ── Step 4: Deploy ───────────────────────────────────
            if tr.model_id:
                print("━━━ Step 4: deploy() ━━━")
                dep = client.deploy(tr.model_id)
                print(f"  Deployment ID: {dep.deployment_id}")
                print(f"  Endpoint URL: {dep.endpoint_url}")
                print()
            else:
                print("  No model_id yet; skipping deploy")
                print()
    except SchlepError as e:
        print(f"  ✗ {type(e).__name__}: {e}")
        return 1

    print("  ✓ Quickstart complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
