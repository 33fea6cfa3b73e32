import logging
import math
from datetime import date
from typing import List, Optional, Tuple

import streamlit as st

import savings_service
from api import backend_message
from auth import current_user_id
from formatting import (
    calculate_progress,
    deadline_label,
    format_amount,
    parse_deadline,
    priority_color,
    priority_label,
)
from models import PRIORITIES, STATUS_COMPLETED, CreateGoalRequest, SavingsGoal
from notifications import toasts

logger = logging.getLogger(__name__)

DEPOSIT = "deposit"
WITHDRAW = "withdraw"
DEFAULT_FREQUENCY = "MONTHLY"


# -------------------------
# Validation
# -------------------------

def parse_amount(text) -> Optional[float]:
    """Positive finite number typed by the user, or None."""
    try:
        amount = float(str(text).strip())
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount


def validate_goal_form(name, target, deadline, priority) -> Tuple[Optional[dict], Optional[str]]:
    """Return (fields, None) for a valid form or (None, message)."""
    name = (name or "").strip()
    if not name:
        return None, "Ingrese un nombre para la meta"

    amount = parse_amount(target)
    if amount is None:
        return None, "Ingrese un monto objetivo válido"

    if not deadline:
        return None, "Seleccione una fecha límite"
    if isinstance(deadline, date):
        deadline = deadline.isoformat()

    if priority not in PRIORITIES:
        return None, "Seleccione una prioridad"

    return {"name": name, "targetAmount": amount, "endDate": deadline, "priority": priority}, None


# -------------------------
# Actions
# -------------------------

def load_goals(user_id, notify=toasts, service=savings_service, previous=None) -> List[SavingsGoal]:
    """Fetch the user's goals; on failure keep showing what we had."""
    try:
        return service.get_savings_goals(user_id)
    except Exception:
        logger.exception("Error loading savings goals for user %s", user_id)
        notify.error("Error al cargar las metas de ahorro")
        return list(previous or [])


def create_goal(user_id, name, target, deadline, priority="MEDIUM",
                notify=toasts, service=savings_service, today: Optional[date] = None) -> bool:
    if not user_id:
        return False

    fields, problem = validate_goal_form(name, target, deadline, priority)
    if problem:
        notify.error(problem)
        return False

    request = CreateGoalRequest(
        **fields,
        startDate=(today or date.today()).isoformat(),
        frequency=DEFAULT_FREQUENCY,
    )
    try:
        service.create_savings_goal(user_id, request)
    except Exception:
        logger.exception("Error creating savings goal")
        notify.error("Error al crear la meta")
        return False

    notify.success("Meta de ahorro creada exitosamente")
    return True


def update_goal(user_id, goal: SavingsGoal, name, target, deadline, priority,
                notify=toasts, service=savings_service) -> bool:
    if not user_id:
        return False

    fields, problem = validate_goal_form(name, target, deadline, priority)
    if problem:
        notify.error(problem)
        return False

    try:
        service.update_savings_goal(goal.id_goal, user_id, fields)
    except Exception as e:
        logger.exception("Error updating savings goal %s", goal.id_goal)
        notify.error(backend_message(e, "Error al actualizar la meta"))
        return False

    notify.success(f'Meta "{fields["name"]}" actualizada')
    return True


def submit_transaction(user_id, goal_id, kind, amount_text, goal_name="",
                       notify=toasts, service=savings_service) -> Optional[SavingsGoal]:
    """
    Deposit into or withdraw from a goal.
    Returns the goal as updated by the backend, None if nothing was done.
    """
    if not goal_id or kind not in (DEPOSIT, WITHDRAW) or not user_id:
        return None

    amount = parse_amount(amount_text)
    if amount is None:
        notify.error("Ingrese un monto válido")
        return None

    try:
        if kind == DEPOSIT:
            updated = service.add_to_savings_goal(goal_id, user_id, amount)
        else:
            updated = service.withdraw_from_savings_goal(goal_id, user_id, amount)
    except Exception as e:
        logger.exception("Error in %s for goal %s", kind, goal_id)
        notify.error(backend_message(e, "Error al procesar la transacción"))
        return None

    name = updated.name if updated else goal_name
    if kind == DEPOSIT:
        notify.success(f'Abono exitoso a "{name}"')
    else:
        notify.success(f'Retiro exitoso de "{name}"')
    return updated


def delete_goal(user_id, goal: SavingsGoal, confirmed: bool,
                notify=toasts, service=savings_service) -> bool:
    if not confirmed or not user_id:
        return False

    try:
        service.delete_savings_goal(goal.id_goal, user_id)
    except Exception:
        logger.exception("Error deleting savings goal %s", goal.id_goal)
        notify.error("Error al eliminar la meta")
        return False

    notify.success(f'Meta "{goal.name}" eliminada')
    return True


# -------------------------
# Session state
# -------------------------

def _goals(user_id) -> List[SavingsGoal]:
    state = st.session_state
    if state.get("goals_user_id") != user_id or state.get("goals_stale", True):
        with st.spinner("Cargando metas..."):
            state["goals"] = load_goals(user_id, previous=state.get("goals"))
        state["goals_user_id"] = user_id
        state["goals_stale"] = False
    return state["goals"]


def _after_mutation():
    st.session_state["goals_stale"] = True
    st.rerun()


# -------------------------
# Dialogs
# -------------------------

@st.dialog("Crear Meta de Ahorro")
def create_goal_dialog(user_id):
    st.caption("Define tu objetivo de ahorro y establece un plazo")
    with st.form("create_goal_form"):
        name = st.text_input("Nombre de la meta", placeholder="Ej: Vacaciones, Auto nuevo")
        target = st.text_input("Monto objetivo", placeholder="0.00")
        deadline = st.date_input("Fecha límite", value=None)
        priority = st.selectbox(
            "Prioridad", PRIORITIES, index=PRIORITIES.index("MEDIUM"), format_func=priority_label
        )
        submitted = st.form_submit_button("Crear Meta", type="primary", use_container_width=True)

    if submitted and create_goal(user_id, name, target, deadline, priority):
        _after_mutation()


@st.dialog("Editar Meta")
def edit_goal_dialog(user_id, goal: SavingsGoal):
    with st.form(f"edit_goal_form_{goal.id_goal}"):
        name = st.text_input("Nombre de la meta", value=goal.name)
        target = st.text_input("Monto objetivo", value=f"{goal.target_amount:.2f}")
        deadline = st.date_input("Fecha límite", value=parse_deadline(goal.end_date))
        priority = st.selectbox(
            "Prioridad",
            PRIORITIES,
            index=PRIORITIES.index(goal.priority) if goal.priority in PRIORITIES else 1,
            format_func=priority_label,
        )
        submitted = st.form_submit_button("Guardar", type="primary", use_container_width=True)

    if submitted and update_goal(user_id, goal, name, target, deadline, priority):
        _after_mutation()


@st.dialog("Movimiento")
def transaction_dialog(user_id, goal: SavingsGoal, kind: str):
    is_deposit = kind == DEPOSIT
    st.subheader("Ingresar Dinero" if is_deposit else "Retirar Dinero")
    st.caption(f"Meta: {goal.name} (Disponible: {format_amount(goal.current_amount)})")

    with st.form(f"transaction_form_{goal.id_goal}_{kind}"):
        amount = st.text_input(
            "Monto a ingresar" if is_deposit else "Monto a retirar",
            placeholder="0.00",
        )
        if is_deposit:
            st.caption(f"Falta para completar: {format_amount(goal.remaining)}")
        submitted = st.form_submit_button(
            "Ingresar" if is_deposit else "Retirar", type="primary", use_container_width=True
        )

    if not submitted:
        return

    updated = submit_transaction(user_id, goal.id_goal, kind, amount, goal_name=goal.name)
    if updated is None:
        return
    if is_deposit and updated.status == STATUS_COMPLETED:
        st.session_state["celebrate_goal"] = updated.name
    _after_mutation()


@st.dialog("Eliminar Meta")
def delete_goal_dialog(user_id, goal: SavingsGoal):
    st.write(f'¿Estás seguro de eliminar la meta "{goal.name}"?')
    c1, c2 = st.columns(2)
    if c1.button("Cancelar", use_container_width=True):
        st.rerun()
    if c2.button("Eliminar", type="primary", use_container_width=True):
        if delete_goal(user_id, goal, confirmed=True):
            _after_mutation()


@st.dialog("¡Felicidades!")
def celebration_dialog(goal_name: str):
    st.balloons()
    st.markdown(f'### 🎉 ¡Has completado la meta de ahorro "{goal_name}"!')
    if st.button("¡Genial!", type="primary", use_container_width=True):
        st.rerun()


# -------------------------
# Page
# -------------------------

def _goal_card(user_id, goal: SavingsGoal):
    progress = calculate_progress(goal.current_amount, goal.target_amount)
    completed = goal.is_completed

    with st.container(border=True):
        head, badge = st.columns([3, 1])
        head.markdown(f"{'✅' if completed else '🎯'} **{goal.name}**")
        badge.markdown(f":{priority_color(goal.priority)}-background[{priority_label(goal.priority)}]")

        st.caption(f"Progreso: {progress:.1f}%")
        st.progress(int(progress))

        c1, c2 = st.columns(2)
        c1.markdown(f"Actual  \n:green[**{format_amount(goal.current_amount)}**]")
        c2.markdown(f"Objetivo  \n:blue[**{format_amount(goal.target_amount)}**]")

        st.caption(f"📅 {deadline_label(goal)}")
        if not completed:
            st.caption(f"Falta: {format_amount(goal.target_amount - goal.current_amount)}")

        b1, b2, b3, b4 = st.columns(4)
        key = goal.id_goal
        if b1.button("Ingresar", key=f"deposit_{key}", use_container_width=True):
            transaction_dialog(user_id, goal, DEPOSIT)
        if b2.button("Retirar", key=f"withdraw_{key}", use_container_width=True,
                     disabled=goal.current_amount == 0):
            transaction_dialog(user_id, goal, WITHDRAW)
        if b3.button("✏️", key=f"edit_{key}", help="Editar meta", use_container_width=True):
            edit_goal_dialog(user_id, goal)
        if b4.button("🗑️", key=f"delete_{key}", help="Eliminar meta", use_container_width=True):
            delete_goal_dialog(user_id, goal)


def savings_goals_page():
    user_id = current_user_id()

    head, action = st.columns([4, 1])
    with head:
        st.title("Metas de Ahorro")
        st.caption("Define y alcanza tus objetivos financieros")

    if not user_id:
        st.info("Inicia sesión para ver tus metas de ahorro")
        return

    with action:
        if st.button("➕ Nueva Meta", type="primary"):
            create_goal_dialog(user_id)

    celebrate = st.session_state.pop("celebrate_goal", None)
    if celebrate:
        celebration_dialog(celebrate)

    goals = _goals(user_id)
    if not goals:
        st.info("No tienes metas registradas. ¡Crea una para empezar a ahorrar!")
        return

    cols = st.columns(3)
    for i, goal in enumerate(goals):
        with cols[i % 3]:
            _goal_card(user_id, goal)
