"""
Cache Replacement Visualizer — FIFO, LRU & OPT

This application provides an interactive, step-by-step visualization of the
classic cache / page replacement algorithms:
    - FIFO (First-In-First-Out)
    - LRU (Least Recently Used)
    - OPT (Belady's optimal algorithm)

The simulation itself is computed up front by the engine (engine.py); this
file only plays the resulting steps back under user control.

Built with Streamlit for the web interface and Plotly for visualizations.

Run with:
    streamlit run app.py
"""

# =============================================================================
# IMPORTS
# =============================================================================

import time                                  # For pacing the playback
import streamlit as st                       # Web application framework
import plotly.graph_objects as go            # Interactive plotting library

from engine import (
    InvalidConfiguration,
    ReplacementPolicy,
    compute_stats,
    count_faults,
    simulate,
    simulate_all,
)
from playback import DEFAULT_SPEED, MAX_SPEED, MIN_SPEED, PlaybackController
from utils import get_color, slot_labels
from workload import DEFAULT_REQUESTS, format_requests, generate_requests, parse_requests

DEFAULT_CAPACITY = 3
MAX_CAPACITY = 10


# =============================================================================
# CALLBACKS - run before the script reruns, so widget state can be changed
# =============================================================================

def _generate_random_requests():
    st.session_state.access_input = ",".join(generate_requests())


def _controller_action(name: str):
    controller = st.session_state.get("controller")
    if controller is not None:
        getattr(controller, name)()


# =============================================================================
# CHARTS
# =============================================================================

def slot_chart(step, capacity: int, height: int = 150) -> go.Figure:
    """
    Build a bar chart with one bar per cache slot.

    Args:
        step (Optional[Step]): Step whose cache snapshot is drawn, None for an empty cache
        capacity (int): Number of slots to draw
        height (int): Figure height in pixels

    Returns:
        go.Figure: The slot chart
    """
    contents = list(step.cache) if step is not None else []
    labels = slot_labels(step, capacity)
    colors = [
        get_color(contents[i] if i < len(contents) else None, step)
        for i in range(capacity)
    ]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=list(range(capacity)),
        y=[1] * capacity,
        text=labels,
        marker_color=colors,
        hovertext=labels,
        hoverinfo='text'
    ))
    fig.update_layout(
        height=height,
        showlegend=False,
        yaxis=dict(showticklabels=False),
        xaxis=dict(showticklabels=False)
    )
    return fig


# =============================================================================
# STREAMLIT UI - Web Application Interface
# =============================================================================

# Configure the Streamlit page
st.set_page_config(page_title="Cache Replacement Visualizer", layout="wide")

# -----------------------------------------------------------------------------
# SIDEBAR NAVIGATION
# -----------------------------------------------------------------------------

# Page selector for switching between Simulator and Concepts views
page = st.sidebar.radio("Choose View", ["Simulator", "Concepts"])

# Main application title
st.title("Cache Replacement Visualizer — FIFO, LRU & OPT")

# =============================================================================
# CONCEPTS PAGE - Educational Content
# =============================================================================

if page == "Concepts":
    st.header("How Cache Replacement Works")
    st.markdown(
        """
        ## 📘 Key Concepts

        ### **1. Cache**
        - A small, fast store holding a fixed number of items (its *capacity*).
        - Every request either finds its item in the cache or must load it.

        ### **2. Hit**
        - The requested item is already in the cache — no work needed.

        ### **3. Miss (Fault)**
        - The requested item is not in the cache and must be loaded.
        - If the cache is full, one resident item must be **evicted** first.

        ### **4. Replacement Algorithms**
        When the cache is full, the policy decides which item to remove:

        #### **FIFO (First In First Out)**
        - Evict the item that entered the cache earliest.
        - Hits do not change anything.

        #### **LRU (Least Recently Used)**
        - Evict the item that hasn't been used for the longest time.
        - Every hit moves the item to the "most recent" end.

        #### **OPT (Optimal / Belady)**
        - Evict the item whose next use is farthest in the future
          (or that is never used again).
        - Needs the whole future request sequence, so it cannot be built
          in a real system — it is the benchmark the others are measured against.

        ### **5. Statistics**
        - **Hit ratio** = hits / requests
        - **Fault rate** = faults / requests

        ---
        ### ✔ Try the same request sequence under all three policies and compare the misses.
        """
    )
    st.stop()  # Stop rendering - don't show simulator on Concepts page

# =============================================================================
# SIMULATOR PAGE - Main Interactive Interface
# =============================================================================

# -----------------------------------------------------------------------------
# SIDEBAR - Simulation Settings
# -----------------------------------------------------------------------------

st.sidebar.header("Simulation Settings")

# Cache capacity (number of slots)
capacity = st.sidebar.number_input(
    "Cache size (slots)",
    min_value=1,
    max_value=MAX_CAPACITY,
    value=DEFAULT_CAPACITY,
    step=1
)

# Replacement policy selection
policy = st.sidebar.selectbox(
    "Replacement Policy",
    options=list(ReplacementPolicy.ALL)
)

# Playback speed control for animation
speed = round(st.sidebar.slider(
    "Playback speed (steps/sec)",
    min_value=MIN_SPEED,
    max_value=MAX_SPEED,
    value=DEFAULT_SPEED,
    step=0.1
), 1)  # float steps can land a hair outside [MIN_SPEED, MAX_SPEED]

st.sidebar.markdown("---")

# -----------------------------------------------------------------------------
# SIDEBAR - Request Sequence
# -----------------------------------------------------------------------------

st.sidebar.header("Access / Workload")

if "access_input" not in st.session_state:
    st.session_state.access_input = DEFAULT_REQUESTS

# Text input for the request sequence
access_input = st.sidebar.text_area(
    "Request sequence (comma separated keys)",
    key="access_input"
)

# Random city requests
st.sidebar.button("🎲 Generate Requests", on_click=_generate_random_requests)

requests = parse_requests(access_input)

# -----------------------------------------------------------------------------
# SESSION STATE - Precomputed Steps & Playback Controller
# -----------------------------------------------------------------------------

# Rebuild the steps whenever the configuration changes; the new controller
# replaces the old one along with any playback in progress.
config = (int(capacity), policy, tuple(requests))
if st.session_state.get("config") != config:
    try:
        steps = simulate(requests, int(capacity), policy)
    except InvalidConfiguration as e:
        st.sidebar.error(str(e))
        st.stop()
    st.session_state.config = config
    st.session_state.steps = steps
    st.session_state.controller = PlaybackController(steps, speed)

controller: PlaybackController = st.session_state.controller
controller.set_speed(speed)  # Apply selected playback speed

if controller.total == 0:
    st.info("Enter a request sequence in the sidebar (or generate one) to start.")
    st.stop()

st.markdown(f"**Request sequence:** {format_requests(requests)}")

# =============================================================================
# MAIN CONTENT AREA - Two Column Layout
# =============================================================================

col1, col2 = st.columns([1, 2])

# -----------------------------------------------------------------------------
# LEFT COLUMN - Controls and Event Log
# -----------------------------------------------------------------------------

with col1:
    st.subheader("Controls")

    b1, b2, b3 = st.columns(3)
    b1.button("Step", key="step", on_click=_controller_action, args=("step",),
              disabled=controller.finished)
    b2.button("Pause" if controller.playing else "Play", key="play_toggle",
              on_click=_controller_action, args=("toggle",), disabled=controller.finished)
    b3.button("Reset", key="reset", on_click=_controller_action, args=("reset",))

    st.progress(controller.position / controller.total,
                text=f"Step {controller.position} / {controller.total}")

    # Result of the most recent request
    current = controller.current
    if current is None:
        st.write("Press **Step** or **Play** to process the first request.")
    elif current.hit:
        st.success(f"Request {current.index + 1}: {current.key} -> HIT")
    else:
        st.error(f"Request {current.index + 1}: {current.key} -> FAULT")
        if current.evicted is not None:
            st.warning(f"Evicted: {current.evicted}")

    # Display event log (most recent 20 events, newest first)
    st.subheader("Event Log")
    for ev in controller.event_log(limit=20)[::-1]:
        st.write(ev)

# -----------------------------------------------------------------------------
# RIGHT COLUMN - Visualizations
# -----------------------------------------------------------------------------

with col2:
    # ----- Cache Slots Visualization -----
    st.subheader(f"Cache Contents ({policy})")

    st.plotly_chart(slot_chart(current, int(capacity)), use_container_width=True)

    if policy == ReplacementPolicy.LRU:
        st.caption("Ordered least recently used → most recently used")
    elif policy == ReplacementPolicy.FIFO:
        st.caption("Ordered oldest → newest insertion")

    # ----- Statistics Display -----
    st.subheader("Statistics")
    stats = controller.stats()

    m1, m2, m3 = st.columns(3)
    m1.metric("Requests", stats['total_refs'])
    m2.metric("Faults", stats['faults'])
    m3.metric("Hit Ratio", stats['hit_ratio'])

    # ----- Hits vs Faults Bar Chart -----
    fig2 = go.Figure()
    fig2.add_trace(go.Bar(
        x=["Hits", "Faults"],
        y=[stats['hits'], stats['faults']],
        marker_color=["lightgreen", "salmon"]
    ))
    fig2.update_layout(height=300, title="Hits vs Faults")
    st.plotly_chart(fig2, use_container_width=True)

# =============================================================================
# COMPARE - FIFO, LRU & OPT side by side at the same step
# =============================================================================

st.markdown("---")
st.header("Compare: FIFO vs LRU vs OPT")
st.caption(f"All three policies at step {controller.position} / {controller.total}")

# Every policy replays the same requests; the shared cursor picks the step
comparison = simulate_all(requests, int(capacity))

compare_cols = st.columns(len(comparison))
for col, (name, policy_steps) in zip(compare_cols, comparison.items()):
    with col:
        st.subheader(name)
        shown = policy_steps[controller.position - 1] if controller.position > 0 else None
        st.plotly_chart(slot_chart(shown, int(capacity), height=120),
                        use_container_width=True, key=f"compare_{name}")

        if shown is None:
            st.write("—")
        elif shown.hit:
            st.write(f"{shown.key}: HIT")
        elif shown.evicted is not None:
            st.write(f"{shown.key}: FAULT (evicted {shown.evicted})")
        else:
            st.write(f"{shown.key}: FAULT")

        so_far = compute_stats(policy_steps, controller.position)
        st.metric("Misses so far", so_far['faults'])

# ----- Full-sequence Summary -----
st.subheader("Policy Comparison (full sequence)")
rows = []
for name, policy_steps in comparison.items():
    policy_stats = compute_stats(policy_steps)
    rows.append({
        "policy": name,
        "misses": count_faults(policy_steps),
        "hits": policy_stats['hits'],
        "hit_ratio": policy_stats['hit_ratio'],
    })
st.table(rows)

# =============================================================================
# FOOTER - Usage Tips
# =============================================================================

st.markdown("---")
st.markdown(
    "**Usage tips**:\n"
    "- Enter a comma separated request sequence or click **Generate Requests**.\n"
    "- Use **Step** to advance one request, **Play** to animate, **Reset** to start over.\n"
    "- Switch the policy to see how FIFO, LRU and OPT choose different victims."
)

st.markdown("---")
st.markdown(
    "**Instructor examples**:\n"
    "1) Belady's anomaly: FIFO with `1,2,3,4,1,2,5,1,2,3,4,5` faults more with 4 slots than with 3.\n"
    "2) LRU vs FIFO: capacity 2, run `A,B,A,C` under both and compare which key is evicted."
)

# -----------------------------------------------------------------------------
# PLAYBACK LOOP - one tick per rerun while playing
# -----------------------------------------------------------------------------

if controller.playing:
    time.sleep(controller.interval)
    controller.tick()
    st.rerun()
