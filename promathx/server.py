"""HTTP API for the calculator.

Routes:

- ``POST /calculate`` evaluate ``{"expression": ...}``
- ``GET /memory``, ``POST /memory``, ``DELETE /memory`` memory slot
- ``GET /health`` liveness probe
"""

import math
import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from . import scientific
from .error import CalcError
from .memory import Memory
from .safe_eval import evaluate
from .util import sanitize_log


LOGGER = logging.getLogger(__name__)

DEFAULT_PORT = 3000


def success(**kwargs):
    return jsonify(status='success', **kwargs)

def error(message, status=400, **kwargs):
    return jsonify(status='error', message=message, **kwargs), status

def get_body():
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form

def to_number(value):
    if isinstance(value, bool):
        raise ValueError('%r: not a number' % value)
    if isinstance(value, str):
        value = value.strip()
    number = float(value)
    if not math.isfinite(number):
        raise ValueError('%r: not a finite number' % value)
    return number


def create_app(memory=None, debug=False):
    app = Flask(__name__)
    app.debug = debug
    app.json.sort_keys = False
    CORS(app)

    if memory is None:
        memory = Memory()
    app.extensions['promathx.memory'] = memory

    @app.post('/calculate')
    def calculate():
        expression = get_body().get('expression')
        if not expression:
            return error('Expression is required')
        if not isinstance(expression, str):
            return error('Expression must be a string')
        try:
            result = evaluate(expression)
        except CalcError as ex:
            LOGGER.info('calculate %s: %s', sanitize_log(expression), ex)
            return error(str(ex))
        LOGGER.info('calculate %s = %r', sanitize_log(expression), result)
        return success(result=result, scientific=scientific.format(result))

    @app.get('/memory')
    def recall():
        return success(value=memory.recall())

    @app.post('/memory')
    def store():
        value = get_body().get('value')
        if value is None:
            return error('Value is required')
        try:
            value = to_number(value)
        except (TypeError, ValueError):
            return error('Invalid numeric value')
        memory.store(value)
        LOGGER.info('memory store %r', value)
        return success(message='Value stored in memory')

    @app.delete('/memory')
    def clear():
        memory.clear()
        LOGGER.info('memory clear')
        return success(message='Memory cleared')

    @app.get('/health')
    def health():
        return jsonify(
            status='OK',
            message='ProMathX Calculator API is running'
        )

    @app.errorhandler(HTTPException)
    def http_error(ex):
        return error(ex.name, ex.code)

    @app.errorhandler(Exception)
    def internal_error(ex):
        LOGGER.exception('unhandled error: %r', ex)
        if app.debug:
            return error('Something went wrong!', 500, error=str(ex))
        return error('Something went wrong!', 500)

    return app
