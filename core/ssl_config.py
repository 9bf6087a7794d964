"""SSL configuration for PyInstaller builds."""

import os
import ssl
import sys


def get_ssl_context() -> ssl.SSLContext:
    """Default SSL context, pointing at the bundled CA file when frozen."""
    context = ssl.create_default_context()

    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        bundle_dir = getattr(sys, "_MEIPASS", os.path.dirname(os.path.abspath(__file__)))

        for ca_bundle in (
            os.path.join(bundle_dir, "cacert.pem"),
            os.path.join(bundle_dir, "certifi", "cacert.pem"),
        ):
            if os.path.exists(ca_bundle):
                context.load_verify_locations(ca_bundle)
                break

    return context
