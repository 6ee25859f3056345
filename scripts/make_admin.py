"""Create an admin account from the command line.

Usage: python scripts/make_admin.py <username> <password>
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from member_directory import create_app
from member_directory.errors import HashError, StorageError
from member_directory.services import register_admin


def main(argv):
    if len(argv) != 3:
        print(__doc__)
        return 2

    app = create_app()
    with app.app_context():
        try:
            register_admin(argv[1], argv[2])
        except (HashError, StorageError) as e:
            print(f"Could not create admin: {e}")
            return 1

    print(f"Admin {argv[1]} created")
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
