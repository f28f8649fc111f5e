import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Port for the dev server started by run.py
    PORT = int(os.environ.get('PORT', '8084'))
    # Page the browser is redirected to on /newgame and /joingame
    GAME_PAGE = os.environ.get('GAME_PAGE', '/tictactoe.html')
    # Comma separated list of frontend origins allowed by CORS and Socket.IO
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173,http://localhost:8084,http://127.0.0.1:8084',
        ).split(',') if o.strip()
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
