"""Workout log and report routes."""

from datetime import date

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ...models.workout import Workout
from ...services.tracker import ExerciseService, WorkoutService
from ...validation import parse_date_range, parse_entry_form, parse_workout_form

router = APIRouter(prefix="/workouts", tags=["workouts"])


def get_templates(request: Request):
    """Get templates from app state."""
    return request.app.state.templates


def get_service(request: Request) -> WorkoutService:
    return WorkoutService(request.app.state.db_path)


def edit_url(workout_id: int) -> str:
    return f"/workouts/edit/{workout_id}"


async def render_form(request: Request, workout: Workout):
    """Render the workout form with the exercise dropdown choices."""
    templates = get_templates(request)
    exercises = await ExerciseService(request.app.state.db_path).list_exercises()

    return templates.TemplateResponse(
        request,
        "workouts/form.html",
        {
            "workout": workout,
            "exercises": exercises,
        },
    )


@router.get("", response_class=HTMLResponse)
async def workouts_list(request: Request):
    """List all workouts."""
    templates = get_templates(request)

    return templates.TemplateResponse(
        request,
        "workouts/list.html",
        {
            "workouts": await get_service(request).list_workouts(),
        },
    )


@router.get("/new", response_class=HTMLResponse)
async def new_workout_form(request: Request):
    """Show an empty workout form, dated today."""
    return await render_form(request, Workout(workout_date=date.today()))


@router.get("/edit/{workout_id}", response_class=HTMLResponse)
async def edit_workout_form(request: Request, workout_id: int):
    """Show a workout with its entries and the add-entry form."""
    workout = await get_service(request).get_workout(workout_id)
    return await render_form(request, workout)


@router.post("/save")
async def save_workout(
    request: Request,
    workout_date: str | None = Form(None, alias="workoutDate"),
    notes: str | None = Form(None),
    workout_id: str | None = Form(None, alias="id"),
):
    """Create a workout, or update the date and notes of an existing one."""
    data = parse_workout_form(workout_date, notes, workout_id)
    workout = await get_service(request).save_workout(data)
    return RedirectResponse(url=edit_url(workout.id), status_code=302)


@router.get("/delete/{workout_id}")
async def delete_workout(request: Request, workout_id: int):
    """Delete a workout and its entries."""
    await get_service(request).delete_workout(workout_id)
    return RedirectResponse(url="/workouts", status_code=302)


@router.post("/{workout_id}/addEntry")
async def add_entry(
    request: Request,
    workout_id: int,
    exercise_id: str | None = Form(None, alias="exerciseId"),
    sets: str | None = Form(None),
    reps: str | None = Form(None),
    weight: str | None = Form(None),
):
    """Add an exercise entry to a workout."""
    data = parse_entry_form(exercise_id, sets, reps, weight)
    await get_service(request).add_entry(workout_id, data)
    return RedirectResponse(url=edit_url(workout_id), status_code=302)


@router.get("/{workout_id}/deleteEntry/{entry_id}")
async def delete_entry(request: Request, workout_id: int, entry_id: int):
    """Remove an entry from a workout."""
    await get_service(request).remove_entry(workout_id, entry_id)
    return RedirectResponse(url=edit_url(workout_id), status_code=302)


@router.get("/report", response_class=HTMLResponse)
async def report_form(request: Request):
    """Show the empty report form."""
    templates = get_templates(request)
    return templates.TemplateResponse(
        request,
        "workouts/report.html",
        {
            "report": None,
            "workouts": [],
        },
    )


@router.post("/report", response_class=HTMLResponse)
async def generate_report(
    request: Request,
    from_date: str | None = Form(None, alias="fromDate"),
    to_date: str | None = Form(None, alias="toDate"),
):
    """Report the workouts and total weight lifted within a date range."""
    templates = get_templates(request)
    date_range = parse_date_range(from_date, to_date)
    report = await get_service(request).report(date_range.from_date, date_range.to_date)

    return templates.TemplateResponse(
        request,
        "workouts/report.html",
        {
            "report": report,
            "workouts": report.workouts,
            "fromDate": report.from_date,
            "toDate": report.to_date,
            "totalWeightLifted": report.total_weight_lifted,
        },
    )
