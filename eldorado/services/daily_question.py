"""Question-of-the-day catalog for the daily quiz booster."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from ..core.time import today

QUESTIONS: List[Dict[str, Any]] = [
    {"q": "Cual es la stablecoin mas utilizada del mundo?", "options": ["USDT", "USDC", "DAI", "BUSD"], "answer": 0},
    {"q": "Quien creo Bitcoin?", "options": ["Vitalik Buterin", "Satoshi Nakamoto", "Charles Hoskinson", "Elon Musk"], "answer": 1},
    {"q": 'Que significa "HODL" en cripto?', "options": ["Vender rapido", "Mantener a largo plazo", "Comprar mas", "Hacer trading"], "answer": 1},
    {"q": "En que ano se creo Bitcoin?", "options": ["2007", "2009", "2011", "2013"], "answer": 1},
    {"q": "Que blockchain usa El Dorado para transferencias?", "options": ["Bitcoin", "Ethereum", "Tron", "Varias redes"], "answer": 3},
    {"q": "Que es una wallet en cripto?", "options": ["Un exchange", "Una billetera digital", "Un token", "Un banco"], "answer": 1},
    {"q": "Cual es el simbolo de Ethereum?", "options": ["BTC", "ETH", "XRP", "SOL"], "answer": 1},
    {"q": "Que significa P2P?", "options": ["Pay to Play", "Peer to Peer", "Point to Point", "Price to Price"], "answer": 1},
    {"q": "Que es KYC?", "options": ["Una criptomoneda", "Verificacion de identidad", "Un tipo de wallet", "Un exchange"], "answer": 1},
    {"q": "Cuantos Bitcoin existiran como maximo?", "options": ["10 millones", "21 millones", "100 millones", "Infinitos"], "answer": 1},
    {"q": "Que es un NFT?", "options": ["Una moneda", "Un token no fungible", "Un exchange", "Una blockchain"], "answer": 1},
    {"q": "Que red es conocida por sus bajas comisiones?", "options": ["Bitcoin", "Ethereum", "Tron", "Ninguna"], "answer": 2},
    {"q": "Que es DeFi?", "options": ["Finanzas descentralizadas", "Un token", "Un banco digital", "Una app"], "answer": 0},
    {"q": 'Que significa "gas" en Ethereum?', "options": ["Combustible", "Comision de transaccion", "Un token", "Velocidad"], "answer": 1},
]


def question_for(day: Optional[date] = None) -> Dict[str, Any]:
    """Pick the question for ``day`` by rotating through the catalog by day of year."""

    day = day or today()
    return QUESTIONS[day.timetuple().tm_yday % len(QUESTIONS)]


def public_question(day: Optional[date] = None) -> Dict[str, Any]:
    question = question_for(day)
    return {"question": question["q"], "options": list(question["options"])}


def is_correct(answer: int, day: Optional[date] = None) -> bool:
    return answer == question_for(day)["answer"]


__all__ = ["QUESTIONS", "is_correct", "public_question", "question_for"]
