#!/usr/bin/env python3
"""
Local test script to drive the dashboard Lambda without Docker.
This simulates a browser session against the Lambda handler locally.

Usage:
    python local_test.py "Pune, Maharashtra"
    python local_test.py "Pune, Maharashtra" en
    python local_test.py --gps 18.5204 73.8567

Speech synthesis is skipped unless AWS credentials are configured:
   aws configure
"""

import sys
import os
import json

# IMPORTANT: Set environment variables BEFORE any imports
os.environ.setdefault("AWS_REGION", "ap-south-1")
os.environ.setdefault("SIMULATED_DELAY_SECONDS", "2.0")

# Add the project root to path so the 'src' package can be found
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

SESSION_ID = "local-test"


def _call(lambda_handler, method, path, body=None, language=None):
    headers = {"X-Session-Id": SESSION_ID}
    if language:
        headers["X-Language"] = language
    event = {
        "httpMethod": method,
        "path": path,
        "headers": headers,
        "body": json.dumps(body) if body is not None else None,
    }
    response = lambda_handler(event, {})
    return response["statusCode"], json.loads(response["body"])


def main():
    if len(sys.argv) < 2:
        print("Usage: python local_test.py \"<location>\" [language]")
        print("       python local_test.py --gps <latitude> <longitude> [language]")
        print("Example: python local_test.py \"Pune, Maharashtra\" en")
        sys.exit(1)

    if sys.argv[1] == "--gps":
        if len(sys.argv) < 4:
            print("❌ Error: --gps needs latitude and longitude")
            sys.exit(1)
        path = "/location/gps"
        body = {"latitude": float(sys.argv[2]), "longitude": float(sys.argv[3]), "wait": True}
        language = sys.argv[4] if len(sys.argv) > 4 else "hi"
    else:
        path = "/location"
        body = {"address": sys.argv[1], "wait": True}
        language = sys.argv[2] if len(sys.argv) > 2 else "hi"

    print(f"\n📍 Location: {body.get('address') or (body['latitude'], body['longitude'])}")
    print(f"🌐 Language: {language}\n")
    print("=" * 50)

    try:
        from src.handler import lambda_handler

        print("⏳ Selecting location and waiting for weather, soil and crop data...")
        status, result = _call(lambda_handler, "POST", path, body, language)
        print(f"✅ Status: {status}")
        print(json.dumps(result["state"], indent=2, ensure_ascii=False))

        for tab in ("weather", "soil", "recommendations", "dashboard"):
            status, view = _call(lambda_handler, "GET", f"/view/{tab}")
            print("\n" + "=" * 50)
            print(f"📄 {tab} ({status})")
            print(json.dumps(view.get("view", view), indent=2, ensure_ascii=False))

        status, narration = _call(lambda_handler, "POST", "/narrate", {"subject": "dashboard"})
        print("\n" + "=" * 50)
        print(f"🔊 Narration ({status}): {narration.get('text')}")
        if narration.get("audio") is None:
            print("   (speech synthesis unavailable, text only)")

    except Exception as e:
        print(f"\n❌ Error: {str(e)}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
