"""
AWS Lambda entry point.

Mangum speaks ASGI, so the Flask (WSGI) app is wrapped with asgiref first.
The access token and ephemeris path come from the Lambda environment.
"""
from mangum import Mangum
from asgiref.wsgi import WsgiToAsgi
from iruastro import create_app

flask_app = create_app()

asgi_app = WsgiToAsgi(flask_app)

handler = Mangum(asgi_app, lifespan="off")
