#!/usr/bin/env python3
"""Print a learning plan for a topic. Usage: python -m scripts.plan_topic "<topic>" [--ask QUESTION --video ID]"""
import argparse
import json
import sys
from pathlib import Path

# Ensure project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.clients.youtube import YouTubeError
from app.services.answering import answer_question
from app.services.planner import NoVideosFound, generate_learning_plan


def main():
    parser = argparse.ArgumentParser(description="Build a learning plan or answer a question")
    parser.add_argument("topic")
    parser.add_argument("--ask", default="", help="Ask a question instead of building a plan")
    parser.add_argument("--video", default=None, help="Video id the question is about")
    args = parser.parse_args()

    if args.ask:
        print(answer_question(args.ask, topic=args.topic, video_id=args.video).text)
        return

    try:
        plan = generate_learning_plan(args.topic)
    except NoVideosFound:
        print(f"No relevant videos found for '{args.topic}'.")
        sys.exit(1)
    except YouTubeError as e:
        print(f"Catalog error: {e}")
        sys.exit(1)

    print(json.dumps(plan.model_dump(by_alias=True, exclude_none=True), indent=2))


if __name__ == "__main__":
    main()
