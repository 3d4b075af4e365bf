import bcrypt

DEFAULT_BCRYPT_ROUNDS = 10


def hash_password(plaintext: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")


def verify_password(plaintext: str, digest: str | None) -> bool:
    if not digest:
        return False
    try:
        return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
    except ValueError:
        # Malformed digest or over-long password.
        return False
