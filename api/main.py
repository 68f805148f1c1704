"""FastAPI application"""
from fastapi import FastAPI, Depends, HTTPException, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session
from typing import Dict, List, Optional
from pydantic import BaseModel, Field
import io
import logging
import random

from config import settings
from database.database import get_db, init_db
from database.models import User, ChakraProfile, EmotionTracking, JournalEntry, HealingRitual
from database import repository
from chakra_engine import ChakraCalculator, ChakraCoach, ChakraValues, ChakraEngineError, get_chakra
from chakra_engine.assessment import generate_questions, options_for, score_answers
from chakra_engine.coaching import coach_type_for, get_coach
from chakra_engine.models import ChatMessage, CoachType
from chakra_engine.reference import reference_table
from reports import ReportGenerator, PDFGenerator

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=settings.log_level.upper()
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SoulSync API",
    description="Chakra assessment, recommendations and coaching context",
    version="1.0.0"
)

# Initialization
rng = random.Random(settings.practice_seed) if settings.practice_seed is not None else None
calculator = ChakraCalculator(rng)
coach = ChakraCoach(calculator)
report_generator = ReportGenerator(calculator)
pdf_generator = PDFGenerator(calculator)


@app.on_event("startup")
async def startup_event():
    init_db()


# Request models
class UserCreate(BaseModel):
    username: str
    email: str
    name: str


class CoachingContextRequest(BaseModel):
    values: Optional[ChakraValues] = None
    recent_emotions: Optional[List[str]] = None


class CoachPromptRequest(BaseModel):
    message: str
    coach_type: Optional[CoachType] = None
    history: List[ChatMessage] = Field(default_factory=list)


class EmotionCreate(BaseModel):
    user_id: int
    emotion: str
    intensity: int = Field(..., ge=1, le=10)
    note: Optional[str] = None


class AssessmentAnswers(BaseModel):
    # question id -> answer on the 1-5 scale
    answers: Dict[str, int]


class JournalCreate(BaseModel):
    user_id: int
    content: str = Field(..., min_length=1)
    sentiment_score: Optional[int] = Field(default=None, ge=1, le=10)
    emotion_tags: List[str] = Field(default_factory=list)
    chakra_tags: List[str] = Field(default_factory=list)


class RitualCreate(BaseModel):
    name: str
    description: str
    type: str
    instructions: str
    target_chakra: Optional[str] = None
    target_emotion: Optional[str] = None


# Serialization
def user_to_dict(user: User) -> dict:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "name": user.name,
        "created_at": str(user.created_at)
    }


def profile_to_dict(profile: ChakraProfile) -> dict:
    return {
        "id": profile.id,
        "user_id": profile.user_id,
        "values": profile.to_values().to_dict(),
        "updated_at": str(profile.updated_at)
    }


def emotion_to_dict(entry: EmotionTracking) -> dict:
    return {
        "id": entry.id,
        "user_id": entry.user_id,
        "emotion": entry.emotion,
        "intensity": entry.intensity,
        "note": entry.note,
        "created_at": str(entry.created_at)
    }


def journal_to_dict(entry: JournalEntry) -> dict:
    return {
        "id": entry.id,
        "user_id": entry.user_id,
        "content": entry.content,
        "sentiment_score": entry.sentiment_score,
        "emotion_tags": entry.emotion_tags,
        "chakra_tags": entry.chakra_tags,
        "created_at": str(entry.created_at)
    }


def ritual_to_dict(ritual: HealingRitual) -> dict:
    return {
        "id": ritual.id,
        "name": ritual.name,
        "description": ritual.description,
        "type": ritual.type,
        "target_chakra": ritual.target_chakra,
        "target_emotion": ritual.target_emotion,
        "instructions": ritual.instructions
    }


def require_user(db: Session, user_id: int) -> User:
    user = repository.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def require_profile(db: Session, user_id: int) -> ChakraProfile:
    profile = repository.get_chakra_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Chakra profile not found")
    return profile


def score_or_400(answers: Dict[str, int]) -> ChakraValues:
    try:
        return score_answers(answers)
    except ChakraEngineError as e:
        raise HTTPException(status_code=400, detail=str(e))


# API endpoints
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "SoulSync API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.get("/api/chakras")
async def get_chakras():
    """Static chakra reference table"""
    return {
        "success": True,
        "data": reference_table()
    }


@app.post("/api/chakra/analyze")
async def analyze_chakras(values: ChakraValues):
    """Statuses, balance and recommendations for a profile"""
    analysis = calculator.analyze(values)
    return {
        "success": True,
        "data": analysis.model_dump(by_alias=True)
    }


@app.post("/api/chakra/report")
async def chakra_report(values: ChakraValues, name: Optional[str] = None):
    """Analysis with a text report"""
    analysis = calculator.analyze(values)
    report = report_generator.generate_text_report(values, name=name, analysis=analysis)

    return {
        "success": True,
        "report": report,
        "data": analysis.model_dump(by_alias=True)
    }


@app.post("/api/chakra/visual")
async def chakra_visual(values: ChakraValues):
    """Bar chart of a profile"""
    visual = report_generator.generate_visual_chart(values)

    return StreamingResponse(
        io.BytesIO(visual),
        media_type="image/png",
        headers={"Content-Disposition": "attachment; filename=chakras.png"}
    )


@app.post("/api/chakra/coaching-context")
async def chakra_coaching_context(request: CoachingContextRequest):
    """Prompt context for an ad-hoc profile"""
    context = coach.coaching_context(request.values, request.recent_emotions)
    return {
        "success": True,
        "context": context
    }


@app.get("/api/assessment/questions")
async def assessment_questions():
    """Questionnaire steps with the answer scale of each question"""
    steps = []
    for step in generate_questions():
        questions = []
        for question in step.questions:
            item = question.model_dump(mode="json")
            item["options"] = [option.model_dump() for option in options_for(question)]
            questions.append(item)
        steps.append({"title": step.title, "description": step.description, "questions": questions})

    return {
        "success": True,
        "data": steps
    }


@app.post("/api/assessment/score")
async def score_assessment(request: AssessmentAnswers):
    """Chakra values and analysis from questionnaire answers"""
    values = score_or_400(request.answers)
    return {
        "success": True,
        "values": values.to_dict(),
        "data": calculator.analyze(values).model_dump(by_alias=True)
    }


@app.post("/api/users")
async def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Create a user"""
    if repository.get_user_by_username(db, user.username):
        raise HTTPException(status_code=409, detail="Username already taken")

    db_user = repository.create_user(db, username=user.username, email=user.email, name=user.name)
    logger.info(f"Created user {db_user.id}")

    return {
        "success": True,
        "user_id": db_user.id,
        "data": user_to_dict(db_user)
    }


@app.get("/api/users/{user_id}")
async def get_user(user_id: int, db: Session = Depends(get_db)):
    """Get a user by ID"""
    user = require_user(db, user_id)
    return {
        "success": True,
        "data": user_to_dict(user)
    }


@app.get("/api/users/{user_id}/chakra-profile")
async def get_chakra_profile(user_id: int, db: Session = Depends(get_db)):
    """Stored profile; a mid-scale default is created on first access"""
    require_user(db, user_id)
    profile = repository.get_or_create_chakra_profile(db, user_id)

    return {
        "success": True,
        "data": profile_to_dict(profile)
    }


@app.put("/api/users/{user_id}/chakra-profile")
async def save_chakra_profile(user_id: int, values: ChakraValues, db: Session = Depends(get_db)):
    """Replace the stored profile with a new assessment"""
    require_user(db, user_id)
    profile = repository.save_chakra_profile(db, user_id, values)
    analysis = calculator.analyze(profile.to_values())

    return {
        "success": True,
        "data": profile_to_dict(profile),
        "analysis": analysis.model_dump(by_alias=True)
    }


@app.post("/api/users/{user_id}/assessment")
async def submit_assessment(user_id: int, request: AssessmentAnswers, db: Session = Depends(get_db)):
    """Score questionnaire answers and store them as the user's profile"""
    require_user(db, user_id)
    values = score_or_400(request.answers)
    profile = repository.save_chakra_profile(db, user_id, values)
    logger.info(f"Stored assessment result for user {user_id}")

    return {
        "success": True,
        "data": profile_to_dict(profile),
        "analysis": calculator.analyze(values).model_dump(by_alias=True)
    }


@app.get("/api/users/{user_id}/chakra-report")
async def user_chakra_report(user_id: int, db: Session = Depends(get_db)):
    """Text report for the stored profile"""
    user = require_user(db, user_id)
    values = require_profile(db, user_id).to_values()
    analysis = calculator.analyze(values)

    return {
        "success": True,
        "report": report_generator.generate_text_report(values, name=user.name, analysis=analysis),
        "data": analysis.model_dump(by_alias=True)
    }


@app.get("/api/users/{user_id}/chakra-report.pdf")
async def user_chakra_report_pdf(user_id: int, db: Session = Depends(get_db)):
    """PDF report for the stored profile"""
    user = require_user(db, user_id)
    values = require_profile(db, user_id).to_values()
    pdf = pdf_generator.generate_pdf(values, name=user.name)

    return StreamingResponse(
        io.BytesIO(pdf),
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=chakra-report.pdf"}
    )


@app.get("/api/users/{user_id}/coaching-context")
async def user_coaching_context(user_id: int, coach_type: Optional[CoachType] = None,
                                db: Session = Depends(get_db)):
    """Prompt context from the stored profile, recent emotions and journal tags.

    With ``coach_type`` the response also previews the system message that
    coach would receive.
    """
    require_user(db, user_id)
    values = repository.get_or_create_chakra_profile(db, user_id).to_values()
    emotions = repository.recent_emotions(db, user_id)
    recommendation = coach.coach_recommendations(values)

    result = {
        "success": True,
        "context": coach.coaching_context(values, emotions),
        "recommendation": recommendation.model_dump(by_alias=True)
    }
    if coach_type is not None:
        result["coach_type"] = coach_type.value
        result["messages"] = [
            {"role": "system", "content": coach.system_prompt(coach_type, values, emotions)}
        ]
    return result


@app.post("/api/users/{user_id}/coach-prompt")
async def user_coach_prompt(user_id: int, request: CoachPromptRequest, db: Session = Depends(get_db)):
    """Chat messages ready to send to the coaching model"""
    require_user(db, user_id)
    values = repository.get_or_create_chakra_profile(db, user_id).to_values()
    emotions = repository.recent_emotions(db, user_id)

    coach_type = request.coach_type
    if coach_type is None:
        focus = calculator.determine_focus_chakra(values)
        coach_type = coach_type_for(focus.key)

    messages = coach.build_coach_messages(
        coach_type, request.message,
        values=values, recent_emotions=emotions, history=request.history
    )
    return {
        "success": True,
        "coach_type": coach_type.value,
        "temperature": get_coach(coach_type).temperature,
        "messages": messages
    }


@app.post("/api/emotion-tracking")
async def track_emotion(entry: EmotionCreate, db: Session = Depends(get_db)):
    """Log an emotion"""
    require_user(db, entry.user_id)
    saved = repository.add_emotion(db, entry.user_id, entry.emotion, entry.intensity, entry.note)
    return {
        "success": True,
        "data": emotion_to_dict(saved)
    }


@app.get("/api/users/{user_id}/emotion-tracking")
async def get_emotions(user_id: int, limit: int = Query(50, ge=1, le=500), db: Session = Depends(get_db)):
    """Logged emotions, newest first"""
    require_user(db, user_id)
    entries = repository.list_emotions(db, user_id, limit=limit)
    return {
        "success": True,
        "count": len(entries),
        "data": [emotion_to_dict(e) for e in entries]
    }


@app.post("/api/journal-entries")
async def create_journal_entry(entry: JournalCreate, db: Session = Depends(get_db)):
    """Save a journal entry; sentiment and tags come from the caller"""
    require_user(db, entry.user_id)
    for key in entry.chakra_tags:
        try:
            get_chakra(key)
        except ChakraEngineError as e:
            raise HTTPException(status_code=400, detail=str(e))

    saved = repository.add_journal_entry(
        db, entry.user_id, entry.content,
        sentiment_score=entry.sentiment_score,
        emotion_tags=entry.emotion_tags,
        chakra_tags=entry.chakra_tags
    )
    return {
        "success": True,
        "data": journal_to_dict(saved)
    }


@app.get("/api/users/{user_id}/journal-entries")
async def get_journal_entries(user_id: int, limit: int = Query(50, ge=1, le=500), db: Session = Depends(get_db)):
    """Journal entries, newest first"""
    require_user(db, user_id)
    entries = repository.list_journal_entries(db, user_id, limit=limit)
    return {
        "success": True,
        "count": len(entries),
        "data": [journal_to_dict(e) for e in entries]
    }


@app.get("/api/healing-rituals")
async def get_rituals(target_chakra: Optional[str] = None, target_emotion: Optional[str] = None,
                      db: Session = Depends(get_db)):
    """Ritual library, optionally filtered"""
    rituals = repository.list_rituals(db, target_chakra=target_chakra, target_emotion=target_emotion)
    return {
        "success": True,
        "count": len(rituals),
        "data": [ritual_to_dict(r) for r in rituals]
    }


@app.post("/api/healing-rituals")
async def create_ritual(ritual: RitualCreate, db: Session = Depends(get_db)):
    """Add a ritual to the library"""
    if ritual.target_chakra:
        try:
            get_chakra(ritual.target_chakra)
        except ChakraEngineError as e:
            raise HTTPException(status_code=400, detail=str(e))

    saved = repository.create_ritual(db, **ritual.model_dump())
    return {
        "success": True,
        "data": ritual_to_dict(saved)
    }


@app.get("/api/users/{user_id}/recommended-rituals")
async def recommended_rituals(user_id: int, db: Session = Depends(get_db)):
    """Rituals targeting the user's weakest chakra"""
    require_user(db, user_id)
    values = repository.get_or_create_chakra_profile(db, user_id).to_values()
    weakest = calculator.weakest_chakra(values)
    rituals = repository.list_rituals(db, target_chakra=weakest)

    return {
        "success": True,
        "weakest_chakra": weakest,
        "count": len(rituals),
        "data": [ritual_to_dict(r) for r in rituals]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
