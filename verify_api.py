import requests
import json
import sys

BASE_URL = "http://localhost:3000"
EMAIL = "verify_test@example.com"

ITEM = {
    "addedID": 9001,
    "title": "Verification Tee",
    "userEmail": EMAIL,
    "price": 19.99,
    "image_url": "http://localhost/images/verify.png",
    "userName": "Verifier",
    "size": "M",
}

def print_response(name, response):
    print(f"--- {name} ---")
    print(f"Status: {response.status_code}")
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)
    print("\n")

def verify_collection(add_path, base_path):
    # 1. Add (then add again, expecting the duplicate guard)
    resp = requests.post(f"{BASE_URL}{add_path}", json=ITEM)
    print_response(f"POST {add_path}", resp)
    resp = requests.post(f"{BASE_URL}{add_path}", json=ITEM)
    print_response(f"POST {add_path} (Expected 400)", resp)

    # 2. List all and by owner
    resp = requests.get(f"{BASE_URL}{base_path}")
    print_response(f"GET {base_path}", resp)
    resp = requests.get(f"{BASE_URL}{base_path}/{EMAIL}")
    print_response(f"GET {base_path}/{EMAIL}", resp)
    items = [item for item in resp.json() if item["addedID"] == ITEM["addedID"]]
    if not items:
        print("Added item not found, aborting.")
        return False

    # 3. Delete (then delete again, expecting 404)
    item_id = items[0]["id"]
    resp = requests.delete(f"{BASE_URL}{base_path}/{item_id}")
    print_response(f"DELETE {base_path}/{item_id}", resp)
    resp = requests.delete(f"{BASE_URL}{base_path}/{item_id}")
    print_response(f"DELETE {base_path}/{item_id} (Expected 404)", resp)
    return True

def run_verification():
    print("1. Root...")
    resp = requests.get(f"{BASE_URL}/")
    print_response("Root", resp)

    print("2. Products...")
    resp = requests.get(f"{BASE_URL}/products")
    print_response("Products", resp)

    print("3. Cart...")
    if not verify_collection("/add-product", "/added-items"):
        return 1

    print("4. Wishlist...")
    if not verify_collection("/wishlist", "/wishlist"):
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(run_verification())
