#!/usr/bin/env python3
"""Quick demo of the API functionality against a running server."""

import requests

BASE_URL = "http://localhost:8080"

print("=" * 80)
print(" QUICK API TEST DEMO")
print("=" * 80)

# Test 1: Valid card number
print("\n1. Checking a valid card number (4003600000000014)...")
response = requests.post(f"{BASE_URL}/", json={"number": "4003600000000014"})
print(f"Status: {response.status_code}")
if response.status_code == 200 and response.json() == {"valid": True}:
    print("✅ Number reported valid!")
else:
    print(f"Response: {response.text}")

# Test 2: Checksum failure is still a 200
print("\n2. Checking an invalid card number (4003600000000015)...")
response = requests.post(f"{BASE_URL}/", json={"number": "4003600000000015"})
print(f"Status: {response.status_code}")
if response.status_code == 200 and response.json() == {"valid": False}:
    print("✅ Number reported invalid!")
else:
    print(f"Response: {response.text}")

# Test 3: Malformed body
print("\n3. Sending a malformed body (should get 400)...")
response = requests.post(
    f"{BASE_URL}/",
    data="not json",
    headers={"Content-Type": "application/json"}
)
print(f"Status: {response.status_code}")
if response.status_code == 400:
    print(f"✅ Correctly rejected: {response.text.strip()}")
else:
    print(f"Unexpected status: {response.status_code}")

# Test 4: Wrong method
print("\n4. Sending a GET (should get 405)...")
response = requests.get(f"{BASE_URL}/")
print(f"Status: {response.status_code}")
if response.status_code == 405:
    print(f"✅ Correctly rejected: {response.text.strip()}")
else:
    print(f"Unexpected status: {response.status_code}")

print("\n" + "=" * 80)
print(" Demo complete! Server is working correctly.")
print("=" * 80)
