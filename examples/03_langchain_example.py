from __future__ import annotations

import os

from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, Field

try:
    from langchain_openai import ChatOpenAI
except ImportError:
    raise ImportError("langchain-openai is required: pip install langchain-openai") from None

from thrift_tostring_parser import ThriftStringOutputParser


class Ticket(BaseModel):
    title: str
    priority: int = Field(..., ge=1, le=5)
    labels: list[str] = Field(default_factory=list)


parser = ThriftStringOutputParser(model=Ticket)

llm = ChatOpenAI(
    model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
    temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.0")),
)

prompt = ChatPromptTemplate.from_messages([
    ("system", "You turn bug reports into Ticket records."),
    ("human", "{report}\n\n{format_instructions}"),
])

chain = prompt | llm | parser

result = chain.invoke({
    "report": "Checkout page crashes on Safari when the cart is empty. Blocks purchases.",
    "format_instructions": parser.get_format_instructions(),
})
print(result)
