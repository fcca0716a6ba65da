#!/usr/bin/env python3
"""
Example script demonstrating how to use the Email List Tools API.
"""

import requests
import sys

API_BASE = "http://localhost:8000"


def validate_list(path: str):
    """
    Upload an email list file and print the validation summary.
    
    Args:
        path: Path to a .txt or .csv list
    """
    print(f"🔍 Validating: {path}")
    print("-" * 50)
    
    try:
        with open(path, "rb") as handle:
            response = requests.post(
                f"{API_BASE}/api/v1/validate/upload",
                files={"file": (path, handle)},
                timeout=30,
            )
        if response.status_code == 400:
            print(f"❌ {response.json()['detail']}")
            return
        response.raise_for_status()
        
        result = response.json()
        print(f"📄 Total processed: {result['total']}")
        print(f"✅ Valid: {len(result['valid'])}")
        print(f"❌ Invalid syntax: {len(result['invalid'])}")
        print(f"⚠️  Risky: {len(result['risky'])}")
        if result["duplicates"]:
            print(f"🧹 Removed {result['duplicates']} duplicate(s)")
        
        for category in ("valid", "invalid", "risky"):
            if result[category]:
                print()
                print(f"📬 {category.capitalize()}:")
                for email in result[category]:
                    print(f"   • {email}")
            
    except requests.exceptions.RequestException as e:
        print(f"❌ Request failed: {e}")
        sys.exit(1)


def extract_from(path: str):
    """Extract addresses from any text file and print them."""
    with open(path, "r", encoding="utf-8") as handle:
        text = handle.read()
    
    try:
        response = requests.post(f"{API_BASE}/api/v1/extract", json={"text": text}, timeout=30)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        print(f"❌ Request failed: {e}")
        sys.exit(1)
    
    emails = response.json()["emails"]
    print(f"📧 Found {len(emails)} unique email(s)")
    for email in emails:
        print(f"   • {email}")


def check_health():
    """Check API health."""
    try:
        response = requests.get(f"{API_BASE}/health", timeout=5)
        response.raise_for_status()
        result = response.json()
        
        print("🏥 Health Check:")
        print(f"   Status: {result['status']}")
        print(f"   Version: {result['version']}")
        return True
    except Exception as e:
        print(f"❌ Health check failed: {e}")
        return False


if __name__ == "__main__":
    if len(sys.argv) < 3 or sys.argv[1] not in ("validate", "extract"):
        print("Usage: python example_usage.py validate|extract <file>")
        print("\nExample:")
        print("  python example_usage.py validate contacts.csv")
        print("  python example_usage.py extract notes.txt")
        sys.exit(1)
    
    if not check_health():
        print("\n⚠️  API may not be running. Start it with: python -m emailtools.main")
        sys.exit(1)
    
    print()
    if sys.argv[1] == "validate":
        validate_list(sys.argv[2])
    else:
        extract_from(sys.argv[2])
