"""
English to Urdu word dictionary used by the offline translator.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping

DICTIONARY_CATEGORIES = (
    "Basic Words",
    "Technology",
    "Business",
    "Science",
    "Education",
    "Health",
    "Society",
    "Communication",
    "Actions",
    "Descriptive",
)

_ENTRIES: Dict[str, str] = {
    # Basic words
    "the": "یہ",
    "and": "اور",
    "is": "ہے",
    "in": "میں",
    "to": "کو",
    "of": "کا",
    "a": "ایک",
    "that": "یہ",
    "it": "یہ",
    "with": "کے ساتھ",
    "for": "کے لیے",
    "as": "جیسے",
    "was": "تھا",
    "on": "پر",
    "are": "ہیں",
    "you": "آپ",
    "this": "یہ",
    "be": "ہونا",
    "at": "پر",
    "by": "کے ذریعے",
    "not": "نہیں",
    "or": "یا",
    "have": "ہے",
    "from": "سے",
    "they": "وہ",
    "we": "ہم",
    "but": "لیکن",
    "can": "کر سکتے ہیں",
    "out": "باہر",
    "other": "دوسرے",
    "were": "تھے",
    "all": "تمام",
    "there": "وہاں",
    "when": "جب",
    "up": "اوپر",
    "use": "استعمال",
    "your": "آپ کا",
    "how": "کیسے",
    "our": "ہمارا",
    "if": "اگر",
    "no": "نہیں",
    "had": "تھا",
    "what": "کیا",
    "so": "تو",
    "about": "کے بارے میں",
    # Time and quantity
    "time": "وقت",
    "very": "بہت",
    "would": "گا",
    "has": "ہے",
    "more": "زیادہ",
    "many": "بہت سے",
    "some": "کچھ",
    "first": "پہلا",
    "new": "نیا",
    "good": "اچھا",
    "great": "عظیم",
    "best": "بہترین",
    "old": "پرانا",
    "small": "چھوٹا",
    "large": "بڑا",
    "long": "لمبا",
    "short": "چھوٹا",
    "high": "اونچا",
    "low": "نیچا",
    "big": "بڑا",
    # Actions
    "go": "جانا",
    "see": "دیکھنا",
    "make": "بنانا",
    "get": "لینا",
    "come": "آنا",
    "know": "جاننا",
    "work": "کام",
    "give": "دینا",
    "take": "لینا",
    "find": "تلاش کرنا",
    "think": "سوچنا",
    "say": "کہنا",
    "tell": "بتانا",
    "ask": "پوچھنا",
    "feel": "محسوس کرنا",
    "try": "کوشش کرنا",
    "help": "مدد",
    "show": "دکھانا",
    "play": "کھیلنا",
    "run": "دوڑنا",
    # People
    "people": "لوگ",
    "person": "شخص",
    "man": "آدمی",
    "woman": "عورت",
    "child": "بچہ",
    "family": "خاندان",
    "friend": "دوست",
    "teacher": "استاد",
    "student": "طالب علم",
    "doctor": "ڈاکٹر",
    "engineer": "انجینئر",
    # Places
    "world": "دنیا",
    "country": "ملک",
    "city": "شہر",
    "home": "گھر",
    "school": "اسکول",
    "office": "دفتر",
    "hospital": "ہسپتال",
    "market": "بازار",
    "place": "جگہ",
    "area": "علاقہ",
    # Technology and business
    "technology": "ٹیکنالوجی",
    "business": "کاروبار",
    "company": "کمپنی",
    "system": "نظام",
    "development": "ترقی",
    "software": "سافٹ ویئر",
    "computer": "کمپیوٹر",
    "internet": "انٹرنیٹ",
    "website": "ویب سائٹ",
    "data": "ڈیٹا",
    "information": "معلومات",
    "service": "خدمت",
    "management": "انتظام",
    "project": "منصوبہ",
    "application": "اپلیکیشن",
    "digital": "ڈیجیٹل",
    "online": "آن لائن",
    "mobile": "موبائل",
    "platform": "پلیٹ فارم",
    "network": "نیٹ ورک",
    "security": "سیکیورٹی",
    # Science and innovation
    "science": "سائنس",
    "research": "تحقیق",
    "study": "مطالعہ",
    "analysis": "تجزیہ",
    "method": "طریقہ",
    "process": "عمل",
    "result": "نتیجہ",
    "solution": "حل",
    "problem": "مسئلہ",
    "innovation": "جدت",
    "future": "مستقبل",
    "change": "تبدیلی",
    "growth": "ترقی",
    "progress": "پیش قدمی",
    "success": "کامیابی",
    # AI and modern concepts
    "artificial": "مصنوعی",
    "intelligence": "ذہانت",
    "machine": "مشین",
    "learning": "سیکھنا",
    "algorithm": "الگورتھم",
    "programming": "پروگرامنگ",
    "code": "کوڈ",
    "database": "ڈیٹابیس",
    "design": "ڈیزائن",
    "content": "مواد",
    "media": "میڈیا",
    "communication": "رابطہ",
    "experience": "تجربہ",
    "performance": "کارکردگی",
    "quality": "معیار",
    "support": "سپورٹ",
    "product": "پروڈکٹ",
    "customer": "کسٹمر",
    # Education
    "education": "تعلیم",
    "knowledge": "علم",
    "skill": "مہارت",
    "training": "تربیت",
    "course": "کورس",
    "lesson": "سبق",
    "book": "کتاب",
    "chapter": "باب",
    "page": "صفحہ",
    # Health and society
    "health": "صحت",
    "medical": "طبی",
    "care": "دیکھ بھال",
    "social": "سماجی",
    "community": "کمیونٹی",
    "society": "معاشرہ",
    "culture": "ثقافت",
    "tradition": "روایت",
    "modern": "جدید",
    # Economics and governance
    "economic": "اقتصادی",
    "financial": "مالی",
    "money": "پیسہ",
    "cost": "قیمت",
    "price": "قیمت",
    "value": "قدر",
    "government": "حکومت",
    "policy": "پالیسی",
    "law": "قانون",
    "organization": "تنظیم",
    "institution": "ادارہ",
    # Communication and content
    "blog": "بلاگ",
    "article": "مضمون",
    "story": "کہانی",
    "news": "خبر",
    "report": "رپورٹ",
    "summary": "خلاصہ",
    "description": "تفصیل",
    "example": "مثال",
    "detail": "تفصیل",
    "point": "نکتہ",
    "idea": "خیال",
    "concept": "تصور",
    # Descriptive
    "important": "اہم",
    "main": "بنیادی",
    "key": "کلیدی",
    "major": "اہم",
    "primary": "بنیادی",
    "basic": "بنیادی",
    "simple": "آسان",
    "complex": "پیچیدہ",
    "difficult": "مشکل",
    "easy": "آسان",
    "hard": "مشکل",
    "possible": "ممکن",
    "available": "دستیاب",
    "necessary": "ضروری",
    "useful": "مفید",
}

ENGLISH_URDU_DICTIONARY: Mapping[str, str] = MappingProxyType(_ENTRIES)


def get_dictionary_stats() -> Dict[str, Any]:
    """Return the number of entries and the vocabulary categories covered."""
    return {
        "total_words": len(ENGLISH_URDU_DICTIONARY),
        "categories": list(DICTIONARY_CATEGORIES),
    }
