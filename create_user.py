import argparse
import secrets

from gym_app import create_app
from gym_app.extensions import db
from gym_app.models.user import User


def main():
    parser = argparse.ArgumentParser(description="Create a gym tracker account")
    parser.add_argument("email")
    parser.add_argument("--name", default="Gym User")
    parser.add_argument("--password", help="generated when omitted")
    args = parser.parse_args()

    app = create_app()
    with app.app_context():
        email = args.email.strip().lower()
        # لو الإيميل موجود بالفعل، ما يضيفش
        if User.query.filter_by(email=email).first():
            print(f"User with email '{email}' already exists.")
            return

        password = args.password or secrets.token_urlsafe(16)
        user = User(email=email, name=args.name)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()

        print("User created successfully!")
        print(f"Email: {email}")
        print(f"Password: {password}")


if __name__ == "__main__":
    main()
