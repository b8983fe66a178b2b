import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma separated list of frontend origins allowed by CORS / Socket.IO
    CORS_ORIGINS = [o.strip() for o in os.environ.get(
        'CORS_ORIGINS',
        'http://localhost:5173,http://127.0.0.1:5173,http://localhost:5174,http://127.0.0.1:5174',
    ).split(',') if o.strip()]
    # Neighbour rule for move paths: 'offset' (index arithmetic) or 'grid' (true 4x4 king moves)
    ADJACENCY_MODE = os.environ.get('ADJACENCY_MODE', 'offset')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
