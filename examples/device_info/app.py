"""Device Information: the home page of a device.

Static assets are served from ./static (pre-gzipped where a .gz sibling
exists). ``/`` falls through the static middleware to a handler whose
data is rendered into views/index.html; ``/api/info`` has no view, so the
same kind of data goes out as JSON.

Run:
    python app.py
"""

import os
import platform
import time
from pathlib import Path

from home import App, AppConfig, ExpectedError

HERE = Path(__file__).parent

DEVICE_SN = os.environ.get("DEVICE_SN", platform.node())

app = App(AppConfig(host="0.0.0.0", port=8080, views=HERE / "views"))

app.use("/", App.static(HERE / "static"))


def device_info() -> dict:
    return {"sn": DEVICE_SN, "time": int(time.time() * 1000)}


@app.get("/")
def index(request, response):
    return device_info()


@app.get("/api/info")
def info(request, response):
    return device_info()


@app.post("/api/reboot")
def reboot(request, response):
    raise ExpectedError("Reboot is not supported on this device", 501)


if __name__ == "__main__":
    app.listen()
