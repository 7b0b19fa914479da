"""
Print a signed token for trying the API by hand:

    python scripts/make_token.py admin --admin
    curl -H "Authorization: Bearer <token>" ...
"""
import sys
import os
import argparse

# Ensure we can import jobly modules
sys.path.append(os.getcwd())

from jobly.services.auth import create_token

def main():
    parser = argparse.ArgumentParser(description="Issue a Jobly API token")
    parser.add_argument("username")
    parser.add_argument("--admin", action="store_true", help="grant admin rights")
    args = parser.parse_args()
    print(create_token(args.username, is_admin=args.admin))

if __name__ == "__main__":
    main()
