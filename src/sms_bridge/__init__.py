from dotenv import load_dotenv

# Pick up TWILIO_* and CHAT_BACKEND_* from a local .env during development.
load_dotenv()
