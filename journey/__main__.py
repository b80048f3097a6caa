#setup: pip install -e ".[test]"
#setup: python -m journey   (or: flask --app journey.app:create_app run --port 5000 --debug)

from journey.app import create_app

app = create_app()

if __name__ == "__main__":
    app.run(port=5000, debug=True)
