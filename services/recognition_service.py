"""
Recognition service: food photos and receipts read by the vision model.

The model answers in free text; the parsers below pull structured items out
of that text line by line. Lines that do not match are ignored.
"""

from typing import Any, Dict, List, Optional
import logging
import re

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore
from adapters.llm_adapter import LanguageModelClient
from repositories import FoodRecognitionRepository, ReceiptRepository, utcnow

logger = logging.getLogger("pantrykeeper.recognition")

DEFAULT_CONFIDENCE = 0.9

FOOD_ITEM_PATTERN = re.compile(r"([^(]+)\s*\(([^)]+)\)")
RECEIPT_LINE_PATTERN = re.compile(r"([^$]+)\s*\$(\d+\.?\d*)")
LIST_MARKER = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s*")
TOTAL_LINE = re.compile(r"^\s*(?:grand\s+)?total\b", re.IGNORECASE)
SUMMARY_LINE = re.compile(r"^\s*(?:sub\s*total|tax|grand\s+total|total)\b", re.IGNORECASE)
DATE_PATTERN = re.compile(r"\b(\d{1,4}[/-]\d{1,2}[/-]\d{1,4})\b")

FOOD_PROMPT = (
    "You are a food recognition expert. Analyze the image and identify all food "
    "items present. List one item per line as: name (category), where category "
    "is e.g. fruit, vegetable, meat, dairy."
)
RECEIPT_PROMPT = (
    "You are a receipt scanning expert. Analyze the receipt image and extract all "
    "items with their prices. List one item per line as: name $price."
)


def _strip_marker(line: str) -> str:
    return LIST_MARKER.sub("", line)


def parse_food_items(text: str) -> List[Dict[str, Any]]:
    """Items from lines shaped like ``name (category)``"""
    items = []
    for line in text.splitlines():
        match = FOOD_ITEM_PATTERN.search(_strip_marker(line))
        if not match:
            continue
        name, category = match.group(1).strip(), match.group(2).strip()
        if not name:
            continue
        items.append(
            {"name": name, "category": category, "confidence": DEFAULT_CONFIDENCE}
        )
    return items


def parse_receipt_items(text: str) -> List[Dict[str, Any]]:
    """Items from lines carrying a ``$price``; quantity is taken as 1"""
    items = []
    for line in text.splitlines():
        if SUMMARY_LINE.match(_strip_marker(line)):
            continue
        match = RECEIPT_LINE_PATTERN.search(_strip_marker(line))
        if not match:
            continue
        name = match.group(1).strip().rstrip(":-").strip()
        if not name:
            continue
        price = float(match.group(2))
        items.append({"name": name, "price": price, "quantity": 1, "total": price})
    return items


def parse_receipt(text: str) -> Dict[str, Any]:
    """
    Whole-receipt view of OCR text: the first non-item line is taken as the
    store name, the first date-looking token as the date, and a ``Total``
    line (when present) as the total; otherwise items are summed.
    """
    items = parse_receipt_items(text)
    lines = [l.strip() for l in text.splitlines() if l.strip()]

    store: Optional[str] = None
    for line in lines:
        if "$" not in line and not DATE_PATTERN.search(line):
            store = line
            break

    date_match = DATE_PATTERN.search(text)
    total: Optional[float] = None
    for line in lines:
        if TOTAL_LINE.match(_strip_marker(line)):
            amount = re.search(r"\$(\d+\.?\d*)", line)
            if amount:
                total = float(amount.group(1))
    if total is None and items:
        total = round(sum(i["total"] for i in items), 2)

    return {
        "store": store,
        "date": date_match.group(1) if date_match else None,
        "items": items,
        "total": total,
    }


class RecognitionService:
    @staticmethod
    def recognize_food(
        store: DocumentStore, llm: LanguageModelClient, principal: Principal, image_url: str
    ) -> List[Dict[str, Any]]:
        analysis = llm.describe_image(
            FOOD_PROMPT,
            "What food items are in this image? Provide a detailed analysis.",
            image_url,
            max_tokens=500,
            feature="Food recognition",
        )
        items = parse_food_items(analysis)
        FoodRecognitionRepository(store).create(
            {
                "owner_id": principal.subject_id,
                "image_url": image_url,
                "recognized_items": items,
                "created_at": utcnow(),
            }
        )
        logger.info(f"food_recognized user_id={principal.subject_id} items={len(items)}")
        return items

    @staticmethod
    def scan_receipt(
        store: DocumentStore, llm: LanguageModelClient, principal: Principal, image_url: str
    ) -> List[Dict[str, Any]]:
        analysis = llm.describe_image(
            RECEIPT_PROMPT,
            "Please analyze this receipt and extract all items with their prices and quantities.",
            image_url,
            max_tokens=1000,
            feature="Receipt scanning",
        )
        items = parse_receipt_items(analysis)
        ReceiptRepository(store).create(
            {
                "owner_id": principal.subject_id,
                "image_url": image_url,
                "items": items,
                "created_at": utcnow(),
            }
        )
        logger.info(f"receipt_scanned user_id={principal.subject_id} items={len(items)}")
        return items

    @staticmethod
    def process_receipt_text(store: DocumentStore, user_id: str, text: str) -> Dict[str, Any]:
        """Parse receipt text that was already run through OCR and store the result"""
        receipt = parse_receipt(text)
        ReceiptRepository(store).create(
            {"owner_id": user_id, "source": "text", **receipt, "created_at": utcnow()}
        )
        logger.info(f"receipt_processed user_id={user_id} items={len(receipt['items'])}")
        return receipt
