"""
Quick smoke check against a running Puzzle Submission API.
Sends one submission and prints the leaderboard.
"""

import json
import os
import sys

import requests

# Configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")
NAME = "Smoke Tester"
EMAIL = "smoke-tester@example.com"


def check_welcome() -> bool:
    response = requests.get(f"{API_BASE_URL}/", timeout=10)
    print(f"GET / -> {response.status_code}: {response.text}")
    return response.status_code == 200


def check_submit(answer: str) -> bool:
    """Submit one answer; a 400 attempt-limit reply still counts as a live server."""
    payload = {"name": NAME, "email": EMAIL, "answer": answer}
    response = requests.post(f"{API_BASE_URL}/submit", json=payload, timeout=10)
    print(f"POST /submit -> {response.status_code}")
    print(json.dumps(response.json(), indent=2))
    return response.status_code in (200, 400)


def check_leaderboard() -> bool:
    response = requests.get(f"{API_BASE_URL}/leaderboard", timeout=10)
    print(f"GET /leaderboard -> {response.status_code}")
    print(json.dumps(response.json(), indent=2))
    return response.status_code == 200 and len(response.json()) <= 10


if __name__ == "__main__":
    answer = sys.argv[1] if len(sys.argv) > 1 else "42"
    print(f"\n🚀 Smoke testing {API_BASE_URL}\n")

    try:
        results = [check_welcome(), check_submit(answer), check_leaderboard()]
    except requests.exceptions.ConnectionError:
        print("❌ Cannot connect to server. Is uvicorn running?")
        sys.exit(1)

    if all(results):
        print("\n✅ All checks passed")
    else:
        print("\n❌ Some checks failed")
        sys.exit(1)
