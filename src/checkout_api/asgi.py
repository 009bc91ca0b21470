from __future__ import annotations

from checkout_api.adapters.inbound.web.fastapi_app import create_app
from checkout_api.bootstrap import build_usecases

usecases = build_usecases()
app = create_app(usecases.place_checkout, usecases.catalog)
