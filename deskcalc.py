"""
DeskCalc Professional Calculator
Launches the desktop window, the JSON API, or both around one shared calculator
"""
import argparse
import threading

from werkzeug.serving import make_server

import config
from api import create_app
from dispatcher import ActionDispatcher


class ApiThread(threading.Thread):
    """Serves the API for one dispatcher until shutdown() is called"""

    def __init__(self, dispatcher, host=config.WEB_HOST, port=config.WEB_PORT):
        super().__init__(name="deskcalc-api", daemon=True)
        self.server = make_server(host, port, create_app(dispatcher), threaded=True)

    def run(self):
        self.server.serve_forever()

    def shutdown(self):
        self.server.shutdown()
        self.join(timeout=5)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="deskcalc", description=config.APP_NAME)
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--no-api", action="store_true", help="run the window without the JSON API")
    mode.add_argument("--api-only", action="store_true", help="run the JSON API without a window")
    parser.add_argument("--host", default=config.WEB_HOST)
    parser.add_argument("--port", type=int, default=config.WEB_PORT)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    # The window and the API drive the same calculator
    dispatcher = ActionDispatcher()

    if args.api_only:
        print(f"{config.APP_NAME} v{config.VERSION}: API on http://{args.host}:{args.port}/api")
        create_app(dispatcher).run(host=args.host, port=args.port, debug=False)
        return

    api_thread = None
    if not args.no_api:
        try:
            api_thread = ApiThread(dispatcher, args.host, args.port)
        except OSError as e:
            print(f"API disabled, could not bind {args.host}:{args.port}: {e}")
        else:
            api_thread.start()
            print(f"API live on http://{args.host}:{args.port}/api")

    import tkinter as tk
    from gui import DeskCalcGUI

    root = tk.Tk()
    DeskCalcGUI(root, dispatcher)
    try:
        root.mainloop()
    finally:
        if api_thread is not None:
            api_thread.shutdown()
            print("API server stopped")


if __name__ == "__main__":
    main()
