"""Bilingual content tables for template-generated notes.

Every piece of literal text lives here, keyed by (category, section role,
language). Category-independent sections use ``None`` as their category.
Templates may reference ``{chapter}``, ``{class_level}`` and ``{subject}``.
"""

from dataclasses import dataclass
from enum import Enum

from backend.app.models.common import ContentCategory, Language


class SectionRole(str, Enum):
    """Position-defining role of a section within the notes."""

    introduction = "introduction"
    concepts = "concepts"
    application = "application"
    important_points = "important_points"


# Emission order; ordinals follow this sequence starting at 1.
SECTION_ORDER: tuple[SectionRole, ...] = (
    SectionRole.introduction,
    SectionRole.concepts,
    SectionRole.application,
    SectionRole.important_points,
)

CATEGORY_ROLES: frozenset[SectionRole] = frozenset(
    {SectionRole.concepts, SectionRole.application}
)


@dataclass(frozen=True)
class SectionTemplate:
    """Title and bullet templates for one section."""

    title: str
    bullet_points: tuple[str, ...]


PLACEHOLDER_CHAPTER_TITLE: dict[Language, str] = {
    Language.english: "Chapter from PDF",
    Language.hindi: "पीडीएफ से अध्याय",
}

DOCUMENT_TITLE: dict[Language, str] = {
    Language.english: "{chapter}",
    Language.hindi: "अध्याय: {chapter}",
}

CONCLUSION: dict[Language, str] = {
    Language.english: (
        "{chapter} is a crucial chapter in Class {class_level} {subject} curriculum. "
        "The knowledge provided in this chapter is not only important from an examination "
        "perspective but also highly useful in practical life. Understanding these concepts "
        "provides a strong foundation for further studies and future challenges. Through "
        "regular practice and thorough study, mastery in this subject can be achieved. "
        "This chapter connects various aspects of the subject and helps in developing a "
        "comprehensive understanding of the field."
    ),
    Language.hindi: (
        "{chapter} कक्षा {class_level} के {subject} विषय का एक अत्यंत महत्वपूर्ण अध्याय है। "
        "इस अध्याय में दी गई जानकारी न केवल परीक्षा की दृष्टि से महत्वपूर्ण है बल्कि "
        "व्यावहारिक जीवन में भी अत्यधिक उपयोगी है। इन अवधारणाओं को समझना आगे के अध्ययन "
        "और भविष्य की चुनौतियों के लिए एक मजबूत आधार प्रदान करता है। नियमित अभ्यास और "
        "गहन अध्ययन के माध्यम से इस विषय में महारत हासिल की जा सकती है।"
    ),
}

BASE_KEYWORDS: tuple[str, ...] = (
    "{chapter}",
    "{subject}",
    "Class {class_level}",
    "NCERT",
    "Education",
    "Study Notes",
    "Diamond Notes",
)

CATEGORY_KEYWORDS: dict[ContentCategory, tuple[str, ...]] = {
    ContentCategory.mathematics: (
        "Formula",
        "Calculation",
        "Problem Solving",
        "Mathematical Concepts",
    ),
    ContentCategory.science: (
        "Scientific Method",
        "Experiments",
        "Natural Laws",
        "Scientific Principles",
    ),
    ContentCategory.social_studies: (
        "Historical Events",
        "Social Studies",
        "Cultural Heritage",
        "Contemporary Issues",
    ),
    ContentCategory.other: (),
}

SECTION_TEMPLATES: dict[
    tuple[ContentCategory | None, SectionRole, Language], SectionTemplate
] = {
    # Introduction
    (None, SectionRole.introduction, Language.english): SectionTemplate(
        title="Introduction to {chapter}",
        bullet_points=(
            "Fundamental concepts and definitions of {chapter}",
            "Historical context and background of this topic",
            "Importance in Class {class_level} {subject} curriculum",
            "Connection and relevance with other subjects",
        ),
    ),
    (None, SectionRole.introduction, Language.hindi): SectionTemplate(
        title="परिचय - {chapter}",
        bullet_points=(
            "{chapter} की मूलभूत अवधारणाएं और परिभाषाएं",
            "इस विषय का ऐतिहासिक संदर्भ और पृष्ठभूमि",
            "कक्षा {class_level} के {subject} पाठ्यक्रम में इसका महत्व",
            "अन्य विषयों के साथ इसका संबंध और प्रासंगिकता",
        ),
    ),
    # Mathematics
    (ContentCategory.mathematics, SectionRole.concepts, Language.english): SectionTemplate(
        title="Key Formulas and Principles",
        bullet_points=(
            "Important formulas of this chapter and their applications",
            "Detailed explanation of mathematical principles",
            "Problem-solving techniques and methods",
            "Derivation and proof of formulas",
            "Practical applications in real life",
        ),
    ),
    (ContentCategory.mathematics, SectionRole.concepts, Language.hindi): SectionTemplate(
        title="मुख्य सूत्र और सिद्धांत",
        bullet_points=(
            "इस अध्याय के महत्वपूर्ण सूत्र और उनके अनुप्रयोग",
            "गणितीय सिद्धांतों की विस्तृत व्याख्या",
            "समस्याओं को हल करने की तकनीकें",
            "सूत्रों की व्युत्पत्ति और प्रमाण",
            "व्यावहारिक जीवन में इनका उपयोग",
        ),
    ),
    (ContentCategory.mathematics, SectionRole.application, Language.english): SectionTemplate(
        title="Examples and Practice",
        bullet_points=(
            "Solved examples of different types of questions",
            "Step-by-step solution methods",
            "Common mistakes and ways to avoid them",
            "Important questions for practice",
            "Important exam tips and tricks",
        ),
    ),
    (ContentCategory.mathematics, SectionRole.application, Language.hindi): SectionTemplate(
        title="उदाहरण और अभ्यास",
        bullet_points=(
            "विभिन्न प्रकार के प्रश्नों के हल किए गए उदाहरण",
            "चरणबद्ध समाधान की विधि",
            "सामान्य गलतियां और उनसे बचने के तरीके",
            "अभ्यास के लिए महत्वपूर्ण प्रश्न",
            "परीक्षा की दृष्टि से महत्वपूर्ण टिप्स",
        ),
    ),
    # Science
    (ContentCategory.science, SectionRole.concepts, Language.english): SectionTemplate(
        title="Scientific Principles and Laws",
        bullet_points=(
            "Main scientific principles of this chapter",
            "Detailed explanation of natural laws",
            "Conclusions based on experiments and observations",
            "Logic behind scientific facts",
            "Examples of these principles in daily life",
        ),
    ),
    (ContentCategory.science, SectionRole.concepts, Language.hindi): SectionTemplate(
        title="वैज्ञानिक सिद्धांत और नियम",
        bullet_points=(
            "इस अध्याय के मुख्य वैज्ञानिक सिद्धांत",
            "प्राकृतिक नियमों की विस्तृत व्याख्या",
            "प्रयोगों और अवलोकनों के आधार पर निष्कर्ष",
            "वैज्ञानिक तथ्यों के पीछे का तर्क",
            "दैनिक जीवन में इन सिद्धांतों के उदाहरण",
        ),
    ),
    (ContentCategory.science, SectionRole.application, Language.english): SectionTemplate(
        title="Experiments and Activities",
        bullet_points=(
            "Important experiments related to this chapter",
            "Experimental methods and required materials",
            "Results from experiments and their analysis",
            "Safety measures and precautions",
            "Simple experiments that can be done at home",
        ),
    ),
    (ContentCategory.science, SectionRole.application, Language.hindi): SectionTemplate(
        title="प्रयोग और गतिविधियां",
        bullet_points=(
            "इस अध्याय से संबंधित महत्वपूर्ण प्रयोग",
            "प्रयोगों की विधि और आवश्यक सामग्री",
            "प्रयोगों से प्राप्त निष्कर्ष और उनका विश्लेषण",
            "सुरक्षा के उपाय और सावधानियां",
            "घर पर किए जा सकने वाले आसान प्रयोग",
        ),
    ),
    # Social studies
    (ContentCategory.social_studies, SectionRole.concepts, Language.english): SectionTemplate(
        title="Historical Facts and Events",
        bullet_points=(
            "Chronology of important historical events",
            "Contribution and role of key personalities",
            "Social, political and economic factors",
            "Causes and consequences of events",
            "Impact on contemporary society",
        ),
    ),
    (ContentCategory.social_studies, SectionRole.concepts, Language.hindi): SectionTemplate(
        title="ऐतिहासिक तथ्य और घटनाएं",
        bullet_points=(
            "महत्वपूर्ण ऐतिहासिक घटनाओं का कालक्रम",
            "प्रमुख व्यक्तित्वों का योगदान और भूमिका",
            "सामाजिक, राजनीतिक और आर्थिक कारक",
            "घटनाओं के कारण और परिणाम",
            "तत्कालीन समाज पर इनका प्रभाव",
        ),
    ),
    (ContentCategory.social_studies, SectionRole.application, Language.english): SectionTemplate(
        title="Analysis and Significance",
        bullet_points=(
            "In-depth analysis and comparative study of events",
            "Relevance in today's context",
            "Lessons and learning from history",
            "Guidelines for the future",
            "Understanding the topic from different perspectives",
        ),
    ),
    (ContentCategory.social_studies, SectionRole.application, Language.hindi): SectionTemplate(
        title="विश्लेषण और महत्व",
        bullet_points=(
            "घटनाओं का गहन विश्लेषण और तुलनात्मक अध्ययन",
            "आज के समय में इनकी प्रासंगिकता",
            "इतिहास से मिलने वाली सीख और शिक्षा",
            "भविष्य के लिए दिशा-निर्देश",
            "विभिन्न दृष्टिकोणों से विषय की समझ",
        ),
    ),
    # Other subjects
    (ContentCategory.other, SectionRole.concepts, Language.english): SectionTemplate(
        title="Main Content and Concepts",
        bullet_points=(
            "Detailed description of the main content of this chapter",
            "Clear explanation of important concepts",
            "In-depth study of various aspects of the topic",
            "Compilation of related facts and data",
            "Examples for comprehensive understanding of the topic",
        ),
    ),
    (ContentCategory.other, SectionRole.concepts, Language.hindi): SectionTemplate(
        title="मुख्य विषयवस्तु और अवधारणाएं",
        bullet_points=(
            "इस अध्याय की मुख्य विषयवस्तु का विस्तृत विवरण",
            "महत्वपूर्ण अवधारणाओं की स्पष्ट व्याख्या",
            "विषय के विभिन्न पहलुओं का गहन अध्ययन",
            "संबंधित तथ्यों और आंकड़ों का संकलन",
            "विषय की व्यापक समझ के लिए उदाहरण",
        ),
    ),
    (ContentCategory.other, SectionRole.application, Language.english): SectionTemplate(
        title="Practical Applications",
        bullet_points=(
            "Use of this topic in daily life",
            "Connection with contemporary events",
            "Future possibilities and directions",
            "Its utility in professional fields",
            "Its contribution to societal development",
        ),
    ),
    (ContentCategory.other, SectionRole.application, Language.hindi): SectionTemplate(
        title="व्यावहारिक अनुप्रयोग",
        bullet_points=(
            "दैनिक जीवन में इस विषय का उपयोग",
            "समसामयिक घटनाओं के साथ संबंध",
            "भविष्य की संभावनाएं और दिशाएं",
            "व्यावसायिक क्षेत्रों में इसकी उपयोगिता",
            "समाज के विकास में इसका योगदान",
        ),
    ),
    # Important points
    (None, SectionRole.important_points, Language.english): SectionTemplate(
        title="Important Points and Facts",
        bullet_points=(
            "Important facts to remember",
            "Important questions from exam perspective",
            "Common confusions and their clarifications",
            "Additional information and detailed facts",
            "Connection with other related chapters",
        ),
    ),
    (None, SectionRole.important_points, Language.hindi): SectionTemplate(
        title="महत्वपूर्ण बिंदु और तथ्य",
        bullet_points=(
            "याद रखने योग्य महत्वपूर्ण तथ्य",
            "परीक्षा की दृष्टि से महत्वपूर्ण प्रश्न",
            "सामान्य भ्रम और उनके स्पष्टीकरण",
            "अतिरिक्त जानकारी और विस्तृत तथ्य",
            "संबंधित अन्य अध्यायों के साथ संबंध",
        ),
    ),
}


def section_template(
    category: ContentCategory, role: SectionRole, language: Language
) -> SectionTemplate:
    """Look up the template for a section.

    Category-specific roles are keyed by category; the rest are shared.
    """
    key_category = category if role in CATEGORY_ROLES else None
    return SECTION_TEMPLATES[(key_category, role, language)]
