from openai import OpenAI

class OpenAIChat:
    def __init__(self, api_key:str, model:str, base_url:str|None=None):
        self.model = model
        self.client = OpenAI(api_key=api_key, base_url=base_url)
    def complete(self, messages:list[dict])->str:
        completion = self.client.chat.completions.create(model=self.model, messages=messages)
        return completion.choices[0].message.content or ""

def make_llm(api_key:str, model:str="gpt-4o", base_url:str|None=None)->OpenAIChat:
    return OpenAIChat(api_key=api_key, model=model, base_url=base_url)
