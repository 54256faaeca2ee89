import argparse
import logging
import time
import keyboard
import pyautogui
from stroke_recognizer import config as cfg
from stroke_recognizer.capture import CaptureState
from stroke_recognizer.data_handler import DataHandler
from stroke_recognizer.logger import Logger

pyautogui.FAILSAFE = False

QUIT_KEY = 'esc'
POLL_INTERVAL = 0.001


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Draw gestures with the mouse while holding a key, "
                    "either recording them as templates or recognizing them.")
    parser.add_argument("--record", metavar="NAME",
                        help="record gestures as templates under NAME")
    parser.add_argument("--templates-dir", default=cfg.TEMPLATES_DIR)
    parser.add_argument("--draw-key", default='space',
                        help="key to hold while drawing (default: space)")
    parser.add_argument("--points", type=int, default=cfg.POINTS_PER_GESTURE,
                        help="points per resampled gesture")
    parser.add_argument("--ratio", type=float, default=cfg.STANDARD_RATIO,
                        help="size gestures are scaled to")
    parser.add_argument("--anomalies", action="store_true",
                        help="weight sudden differences between gestures")
    parser.add_argument("--dev-tightness", type=float, default=cfg.DEV_TIGHTNESS)
    parser.add_argument("--anomalies-factor", type=float,
                        default=cfg.ANOMALIES_FACTOR)
    parser.add_argument("--true-deviation", action="store_true")
    parser.add_argument("--sampling-rate", type=float, default=cfg.SAMPLING_RATE,
                        help="seconds between samples")
    parser.add_argument("--max-points", type=int, default=None,
                        help="end a gesture after this many points")
    parser.add_argument("-v", "--verbose", action="store_true")

    return parser.parse_args(argv)


def build_config(args):
    return cfg.RecognizerConfig(
        points_per_gesture=args.points,
        standard_ratio=args.ratio,
        anomalies_enabled=args.anomalies,
        dev_tightness=args.dev_tightness,
        anomalies_factor=args.anomalies_factor,
        true_deviation=args.true_deviation,
        recording=args.record is not None,
        template_save_name=args.record or "",
        sampling_rate=args.sampling_rate,
        limit_samples=args.max_points is not None,
        max_points_allowed=args.max_points or cfg.MAX_POINTS_ALLOWED,
        templates_dir=args.templates_dir)


def mouse_position():
    x, y = pyautogui.position()
    # Screen y grows downward
    return (x, -y)


def finish_gesture(handler):
    match, score = handler.end_gesture()

    if score is None:
        print(f"Recorded template: {match.name}")
    else:
        print(f"Gesture: {match.name}; Score: {score:.2f}")


def run(handler, draw_key):
    # Prevents a new gesture from starting until the key is released
    input_ready = True
    last_sample_time = 0

    while not keyboard.is_pressed(QUIT_KEY):
        if keyboard.is_pressed(draw_key):
            if input_ready:
                if handler.session.state == CaptureState.IDLE:
                    handler.start_gesture(mouse_position())

                now = time.time()
                if handler.session.is_capturing and \
                   now - last_sample_time > handler.config.sampling_rate:
                    last_sample_time = now
                    handler.continue_gesture(mouse_position())

                if handler.session.is_completed:
                    finish_gesture(handler)
                    input_ready = False
        else:
            if handler.session.state != CaptureState.IDLE:
                finish_gesture(handler)
            input_ready = True

        time.sleep(POLL_INTERVAL)


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    config = build_config(args)
    template_logger = Logger(config.templates_dir)
    handler = DataHandler(config, template_logger.get_all_templates())

    mode = f"Recording '{config.template_save_name}'" if config.recording \
           else "Recognizing"
    print(f"{mode}; hold {args.draw_key} to draw, {QUIT_KEY} to quit")

    run(handler, args.draw_key)

    for record in handler.recorded:
        template_logger.log(record)
    print("Program has ended.")
