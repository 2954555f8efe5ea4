#!/usr/bin/env python3
"""run_demo.py — Send a few sample requests to a running CareerFlow server.

Usage:
    python scripts/run_demo.py              # default: http://localhost:8000
    python scripts/run_demo.py --base-url http://localhost:8000
"""

from __future__ import annotations

import argparse
import sys

import httpx

from careerflow.errors import PayloadParseError
from careerflow.models.payload_models import parse_payload
from careerflow.models.request_models import OutputShape
from careerflow.prompts.registry import output_shape

DEMO_REQUESTS = [
    {
        "name": "Resume summary rewrite",
        "payload": {
            "type": "summary",
            "text": "Software engineer. Built 3 apps. Likes Python and cloud stuff.",
        },
    },
    {
        "name": "Quiz generation",
        "payload": {
            "type": "quiz_gen",
            "context": {"topic": "Python generators", "difficulty": "Intermediate"},
        },
    },
    {
        "name": "Interview question",
        "payload": {
            "type": "interview_question",
            "context": {"role": "Backend Engineer", "difficulty": "Mid-Level", "previousQuestion": None},
        },
    },
    {
        "name": "Interview answer grading",
        "payload": {
            "type": "interview_feedback",
            "text": "An index is a data structure that speeds up lookups at the cost of writes.",
            "context": {"role": "Backend Engineer", "question": "What is a database index?"},
        },
    },
]


def run_demo(base_url: str) -> None:
    print("═" * 60)
    print(" CareerFlow Generation Service — Demo")
    print("═" * 60)
    print(f"Target: {base_url}\n")

    # Health check
    try:
        resp = httpx.get(f"{base_url}/api/health", timeout=5)
        resp.raise_for_status()
        print(f"✅ Health check: {resp.json()}\n")
    except httpx.HTTPError as exc:
        print(f"❌ Health check failed: {exc}")
        print("   Make sure the server is running: uvicorn careerflow.main:app --reload")
        sys.exit(1)

    succeeded = 0
    for demo in DEMO_REQUESTS:
        kind = demo["payload"]["type"]
        print(f"─── {demo['name']} ({kind})")

        try:
            resp = httpx.post(f"{base_url}/api/generate", json=demo["payload"], timeout=60)
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            print(f"  ❌ Request failed: {exc}\n")
            continue

        if resp.status_code != 200:
            print(f"  ❌ {resp.status_code}: {data.get('error')}\n")
            continue

        text = data["enhancedText"]
        if output_shape(kind) is OutputShape.TEXT:
            print(f"  → {text[:200]}")
        else:
            try:
                payload = parse_payload(kind, text)
            except PayloadParseError as exc:
                print(f"  ❌ Could not parse structured output: {exc}\n")
                continue
            count = len(payload) if isinstance(payload, list) else 1
            print(f"  → Parsed {count} {type(payload).__name__ if count == 1 else 'items'}")
        succeeded += 1
        print()

    print("═" * 60)
    print(f" Results: {succeeded}/{len(DEMO_REQUESTS)} requests completed successfully")
    print("═" * 60)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run CareerFlow demo requests")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    args = parser.parse_args()
    run_demo(args.base_url)
