import asyncio
import httpx
import json
import time

URL = "http://localhost:8080/webhook"
CHAT_ID = 123456789 # Replies go to this chat, use your own id to see them

async def send_update(text: str):
    payload = {
        "update_id": int(time.time()),
        "message": {
            "message_id": 1,
            "date": int(time.time()),
            "chat": {"id": CHAT_ID, "type": "private"},
            "text": text
        }
    }
    
    body = json.dumps(payload).encode('utf-8')
    
    async with httpx.AsyncClient() as client:
        print(f"Sending update to {URL}...")
        resp = await client.post(URL, content=body, headers={"Content-Type": "application/json"})
        print(f"Status: {resp.status_code}")
        print(f"Response: {resp.text}")

if __name__ == "__main__":
    link = input("Enter link to test (default: https://example.com/m.glb): ") or "https://example.com/m.glb"
    asyncio.run(send_update(f"model at {link}"))
