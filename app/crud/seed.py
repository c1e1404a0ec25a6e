"""데모 데이터 적재 ("The First Minute" 리소스와 퀴즈 2개)"""
import logging

from app.crud import quiz as quiz_crud, resource as resource_crud
from app.models.base import generate_id
from app.models.quiz import Question, QuestionOption
from app.models.store import MemoryStore
from app.schemas.quiz import QuizCreateRequest
from app.schemas.resource import ResourceCreateRequest

logger = logging.getLogger(__name__)

OPTION_LETTERS = ("A", "B", "C", "D")

DEMO_RESOURCE = {
    "title": "The First Minute",
    "description": "Master the critical first moments of any interaction or presentation",
    "cover_image_url": "/assets/TFM_1754083535157.png",
}

# (문제, 선택지 A-D, 정답 기호, 해설)
FRAMING_QUESTIONS = [
    (
        "Project Update: 'Hey, about that new project... I was looking at the data, and it's pretty complex. "
        "Lots of moving parts, and we got some feedback from marketing yesterday. Anyway, it's definitely "
        "something we need to think about.' Which of the following best uses framing for this scenario?",
        [
            "Can we talk about the new project? It's complex, and I need you to think about it.",
            "Hi, regarding the 'Phoenix' project, I need to update you because we've identified a major risk.",
            "I heard some things about the project that are complex and involve marketing feedback.",
            "Let's discuss project data and marketing feedback; it's important.",
        ],
        "B",
        "This option clearly states the context ('Phoenix project'), a specific intent ('need to update you'), "
        "and the crucial key message ('identified a major risk'). Options A and D are too vague, and C provides "
        "context but no clear intent or point.",
    ),
    (
        "Request for a Meeting: 'Can we chat? I have a few things I want to go over.' Which of the following "
        "best uses framing for this scenario?",
        [
            "Do you have a few minutes? I'd like to update you on the budget and get your input on staffing.",
            "I need to talk to you about some things. When are you free?",
            "I have several topics that need to be discussed, requiring about 10 minutes of your time.",
            "Can we chat about everything on my mind today?",
        ],
        "A",
        "This option provides a clear intent by stating the purpose and scope of the conversation ('update you "
        "on the budget and get your input on staffing'), and sets a time expectation ('a few minutes') which is "
        "also a form of framing the interaction.",
    ),
    (
        "Hiring Issue: 'So, the new hire for the sales team? We're having some trouble getting them onboarded. "
        "HR is saying something about paperwork.' Which of the following best uses framing for this scenario?",
        [
            "Regarding the new sales hire, I need your advice because there's an issue with their onboarding paperwork.",
            "The sales team onboarding has paperwork issues that HR mentioned.",
            "There's a problem with a new hire; I need to talk to you about it.",
            "The new sales hire can't start because of HR.",
        ],
        "A",
        "This option establishes the context ('new sales hire'), the intent ('need your advice'), and the key "
        "message ('issue with their onboarding paperwork') concisely. The other options are either too vague or "
        "lack a clear request for action/advice.",
    ),
    (
        "Budget Concern: 'About the budget for next quarter... it's looking a bit tight. I've been reviewing the "
        "numbers, and there are some unexpected expenses.' Which of the following best uses framing for this scenario?",
        [
            "The budget is tight. I need help reviewing expenses.",
            "Regarding the Q3 budget, I need your approval for additional funds as we're currently over budget.",
            "We need to discuss financial numbers and unexpected costs for the next quarter.",
            "The budget for next quarter looks bad, so I'm bringing it to your attention.",
        ],
        "B",
        "This option provides clear context ('Q3 budget'), definite intent ('need your approval'), and a direct "
        "key message ('currently over budget,' implying a need for additional funds). Other options are too "
        "general or don't specify the intent or what is needed.",
    ),
    (
        "New Policy Announcement: 'There's a new policy coming out. You'll need to read it. It's pretty long.' "
        "Which of the following best uses framing for this scenario?",
        [
            "I'm letting you know about the new 'Remote Work' policy; it requires everyone to be in the office "
            "three days a week.",
            "The new policy is long, and you have to read it.",
            "There's a new policy that needs your attention, and it's quite detailed.",
            "I need you to review a new document that's been released.",
        ],
        "A",
        "This option immediately identifies the context ('new Remote Work policy'), the intent ('letting you know "
        "about'), and the direct key message ('requires everyone to be in the office three days a week'). The "
        "other options lack specific context or key message details.",
    ),
]

GPS_QUESTIONS = [
    (
        "What does GPS stand for in the context of first-minute interactions?",
        [
            "Goals, Process, Success",
            "Greet, Present, Summarize",
            "Goal, Path, Success metrics",
            "Global Positioning System",
        ],
        "C",
        "GPS stands for Goal, Path, and Success metrics - a framework for clearly communicating what you want to "
        "achieve, how you'll get there, and how you'll know you've succeeded.",
    ),
    (
        "In the GPS method, what should you communicate about the 'Goal'?",
        [
            "Your personal career objectives",
            "What you want to accomplish in this specific interaction",
            "Long-term business strategy",
            "Your schedule for the day",
        ],
        "B",
        "The Goal component focuses specifically on what you want to accomplish in this particular interaction "
        "or meeting.",
    ),
    (
        "What does the 'Path' element of GPS help communicate?",
        [
            "The physical route to your destination",
            "Your career progression plan",
            "The process or approach you'll use to achieve the goal",
            "The agenda for the entire week",
        ],
        "C",
        "The Path explains the process, approach, or methodology you'll use to achieve the stated goal, giving "
        "others clarity on how the interaction will unfold.",
    ),
    (
        "Why are 'Success metrics' important in the GPS method?",
        [
            "They help you track financial performance",
            "They provide clear criteria for knowing when the goal has been achieved",
            "They impress others with your analytical skills",
            "They help you plan future meetings",
        ],
        "B",
        "Success metrics provide clear, measurable criteria so everyone knows exactly what constitutes "
        "successful completion of the interaction or meeting.",
    ),
]

DEMO_QUIZZES = [
    {
        "title": "Framing: Setting the Stage",
        "description": "Master the art of framing interactions to create clarity and reduce anxiety",
        "questions": FRAMING_QUESTIONS,
    },
    {
        "title": "GPS Method: Goal, Path, Success",
        "description": "Learn to use the GPS framework for clear communication and successful outcomes",
        "questions": GPS_QUESTIONS,
    },
]


def build_question(text: str, option_texts: list[str], correct_letter: str, explanation: str) -> Question:
    """선택지 기호로 정답을 지정하여 Question 생성 (ID는 새로 발급)"""
    options = [
        QuestionOption(id=generate_id(), text=option_text, letter=letter)
        for letter, option_text in zip(OPTION_LETTERS, option_texts)
    ]
    correct_option = next(option for option in options if option.letter == correct_letter)
    return Question(
        id=generate_id(),
        text=text,
        options=options,
        correct_answer_id=correct_option.id,
        explanation=explanation,
    )


async def seed_demo_data(store: MemoryStore) -> None:
    """데모 리소스와 퀴즈 적재 (퀴즈 생성 경로를 거쳐 카운터도 함께 갱신)"""
    resource = await resource_crud.create_resource(store, ResourceCreateRequest(**DEMO_RESOURCE))

    for quiz_data in DEMO_QUIZZES:
        await quiz_crud.create_quiz(
            store,
            QuizCreateRequest(
                resource_id=resource.id,
                title=quiz_data["title"],
                description=quiz_data["description"],
                questions=[build_question(*question) for question in quiz_data["questions"]],
            ),
        )

    logger.info(f"데모 데이터 적재 완료: resource_id={resource.id}, quiz_count={len(DEMO_QUIZZES)}")
