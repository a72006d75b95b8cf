from .main import create_app


def run() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=5000, debug=app.config["DEBUG"])


if __name__ == "__main__":
    run()
