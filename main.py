"""Start the test site on its plaintext and TLS listeners.

Configuration comes from the environment (AUTH_USERNAME and AUTH_PASSWORD
are required), see ``siteserver.config``.
"""

from siteserver.server import run


if __name__ == "__main__":
    run()
