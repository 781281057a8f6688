"""Exercise catalog routes."""

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ...models.exercises import Exercise, MuscleGroup
from ...services.tracker import ExerciseService
from ...validation import parse_exercise_form

router = APIRouter(prefix="/exercises", tags=["exercises"])


def get_templates(request: Request):
    """Get templates from app state."""
    return request.app.state.templates


def get_service(request: Request) -> ExerciseService:
    return ExerciseService(request.app.state.db_path)


def render_form(request: Request, exercise: Exercise):
    """Render the create/edit exercise form."""
    templates = get_templates(request)
    return templates.TemplateResponse(
        request,
        "exercises/form.html",
        {
            "exercise": exercise,
            "muscle_groups": [mg.value for mg in MuscleGroup],
        },
    )


@router.get("", response_class=HTMLResponse)
async def exercises_list(request: Request):
    """List the exercise catalog."""
    templates = get_templates(request)
    service = get_service(request)

    return templates.TemplateResponse(
        request,
        "exercises/list.html",
        {
            "exercises": await service.list_exercises(),
            "usage": await service.usage_counts(),
        },
    )


@router.get("/new", response_class=HTMLResponse)
async def new_exercise_form(request: Request):
    """Show an empty exercise form."""
    return render_form(request, Exercise(name=""))


@router.get("/edit/{exercise_id}", response_class=HTMLResponse)
async def edit_exercise_form(request: Request, exercise_id: int):
    """Show the form for an existing exercise."""
    exercise = await get_service(request).get_exercise(exercise_id)
    return render_form(request, exercise)


@router.post("/save")
async def save_exercise(
    request: Request,
    name: str | None = Form(None),
    muscle_group: str | None = Form(None, alias="muscleGroup"),
    exercise_id: str | None = Form(None, alias="id"),
):
    """Create or overwrite an exercise."""
    data = parse_exercise_form(name, muscle_group, exercise_id)
    await get_service(request).save_exercise(data)
    return RedirectResponse(url="/exercises", status_code=302)


@router.get("/delete/{exercise_id}")
async def delete_exercise(request: Request, exercise_id: int):
    """Delete an exercise no workout uses."""
    await get_service(request).delete_exercise(exercise_id)
    return RedirectResponse(url="/exercises", status_code=302)
