"""Create a user account from the command line.

Usage: python scripts/create_user.py USER_ID NAME PASSWORD
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from blogsite import create_app
from blogsite.auth.services import sign_up
from blogsite.errors import DuplicateUser, ValidationError


def main(argv):
    if len(argv) != 3:
        print(__doc__)
        return 2
    
    user_id, name, password = argv
    app = create_app()
    with app.app_context():
        try:
            sign_up(user_id, name, password)
        except (DuplicateUser, ValidationError) as e:
            print(f"Could not create user: {e}")
            return 1
    print(f"User {user_id} created")
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
