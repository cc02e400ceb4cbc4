import logging

import uvicorn
from mealcart.api.api_run import app
from mealcart.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from mealcart.utilities.network import lan_url


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print(f"Shopping list API on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    # Phones on the same network can open the list while at the market
    shared = lan_url(APP_PORT)
    if shared:
        print(f"Accessible from other devices at: {shared}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
