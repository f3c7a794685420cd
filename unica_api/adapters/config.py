import os
class Settings:
    OPENAI_API_KEY=os.getenv('OPENAI_API_KEY','')
    OPENAI_MODEL=os.getenv('OPENAI_MODEL','gpt-4o')
    OPENAI_BASE_URL=os.getenv('OPENAI_BASE_URL') or None
    LOG_LEVEL=os.getenv('UNICA_LOG_LEVEL','INFO')
    CORS_ORIGINS=[o.strip() for o in os.getenv('UNICA_CORS_ORIGINS','*').split(',') if o.strip()]
settings=Settings()
