import os, logging, requests
API_URL = os.environ.get("UNICA_API_URL", "http://localhost:8000")
API_TIMEOUT = float(os.environ.get("UNICA_API_TIMEOUT", "60"))
APOLOGY = "申し訳ない、今ちょっと手が離せなくてな。少し時間を置いてからもう一度相談してくれ。"
logger = logging.getLogger(__name__)

def api_up()->bool:
    try:
        r = requests.get(f"{API_URL}/health", timeout=1.2); return r.ok
    except requests.RequestException: return False

def chat(messages:list)->str:
    """Sends the manager-persona history to the API; any failure becomes one apology line."""
    payload = {"messages": [{"role": m["role"], "content": m["content"]} for m in messages]}
    try:
        r = requests.post(f"{API_URL}/api/chat", json=payload, timeout=API_TIMEOUT)
    except requests.RequestException as e:
        logger.warning("chat API not reachable: %s", e); return APOLOGY
    if not r.ok:
        logger.warning("chat API returned %s: %s", r.status_code, r.text[:200]); return APOLOGY
    try:
        content = (r.json() or {}).get("content")
    except ValueError:
        logger.warning("chat API returned a non-JSON body"); return APOLOGY
    return content if content else APOLOGY
