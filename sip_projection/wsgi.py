#setup: pip install -e .
#setup: flask --app sip_projection.wsgi run --port 5000 --debug

from sip_projection.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=5000, debug=True)
