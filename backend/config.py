import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dice-table-dev-secret'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # Comma separated; must match the client's role list exactly
    ROLES = os.environ.get('ROLES') or '建广,建国,李川,凯宁,鸿晓'
    # Dice per role per round, and faces per die
    DICE_COUNT = int(os.environ.get('DICE_COUNT', '5'))
    DICE_FACES = int(os.environ.get('DICE_FACES', '6'))
    # Optional: fixed RNG seed for reproducible rolls. Unset means system entropy.
    DICE_SEED = os.environ.get('DICE_SEED')
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
