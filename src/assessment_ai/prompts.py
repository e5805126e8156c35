"""
Prompt templates for assessment generation and candidate analysis.

Templates use str.format placeholders; literal JSON braces are doubled.
"""

TEST_GENERATION_PROMPT = """You are an expert technical recruiter creating an assessment test.

Job Title: {job_title}
Job Description: {job_description}
Required Skills: {skills}
Difficulty Level: {difficulty}
Number of Questions: {question_count}
{topics_text}

Generate {question_count} technical assessment questions with the following requirements:

1. Question Types: Use a mix of {question_types}
2. Difficulty: {difficulty_text}
3. Coverage: Ensure questions cover the required skills and topics comprehensively
4. Real-world relevance: Questions should be practical and job-relevant
5. Clear explanations: Provide detailed explanations for correct answers

For each question, provide:
- question: The question text
- type: One of {question_types}
- options: Array of 4 options (for multiple_choice), or ["True", "False"] (for true_false)
- correct_answer: The correct answer(s)
- explanation: Detailed explanation of why the answer is correct
- difficulty: easy, medium, or hard
- topic: The specific topic/skill being tested
- points: Points for this question (easy: 5, medium: 10, hard: 15)

Return the response as a valid JSON object with this exact structure:
{{
  "questions": [
    {{
      "question": "string",
      "type": "multiple_choice",
      "options": ["option1", "option2", "option3", "option4"],
      "correct_answer": "option1",
      "explanation": "string",
      "difficulty": "medium",
      "topic": "string",
      "points": 10
    }}
  ]
}}

IMPORTANT: Return ONLY the JSON object, no additional text or markdown formatting."""

TOPICS_FOCUS_TEXT = "Focus on these specific topics: {topics}"
TOPICS_BROAD_TEXT = "Cover a broad range of relevant topics"
MIXED_DIFFICULTY_TEXT = "Mix of easy (30%), medium (50%), hard (20%)"
SINGLE_DIFFICULTY_TEXT = "All {difficulty} level"

ADDITIONAL_QUESTIONS_PROMPT = """Generate {question_count} additional technical assessment questions that are different from these existing questions:

Existing topics: {existing_topics}
Existing questions (avoid duplicates):
{existing_questions}

{context_lines}

Each question must have the fields question, type, options, correct_answer, explanation, difficulty, topic and points.

Return ONLY a valid JSON array of questions with the same structure as before."""

CANDIDATE_ANALYSIS_PROMPT = """You are an expert technical recruiter analyzing candidate performance for the position of {job_title}.

Candidate: {candidate_name}
Overall Score: {earned_points}/{total_points} points ({score_percentage:.1f}%)
Time Efficiency: {time_efficiency:.1f}% (completed in {actual_duration} min of {test_duration} min allowed)
Total Questions: {question_count}

Performance by Topic:
{topic_summary}

Incorrect or Partially Correct Answers:
{incorrect_answers}

Based on this performance data, provide a comprehensive analysis with:

1. **Strengths**: Identify 2-3 areas where the candidate performed well
2. **Weaknesses**: Identify 2-3 areas needing improvement with specific suggestions
3. **Recommendations**: Provide 3-5 actionable recommendations prioritized by importance
4. **Overall Summary**: A brief paragraph summarizing the candidate's readiness for the role
5. **Skill Level Estimation**: Assess if the candidate is beginner, intermediate, advanced, or expert
6. **Readiness Score**: On a scale of 0-100, how ready is the candidate for this role?

Return the response as a valid JSON object with this exact structure:
{{
  "strengths": [
    {{
      "topic": "string",
      "score": 85,
      "description": "string explaining what they did well"
    }}
  ],
  "weaknesses": [
    {{
      "topic": "string",
      "score": 45,
      "description": "string explaining the weakness",
      "improvementSuggestions": ["suggestion 1", "suggestion 2", "suggestion 3"]
    }}
  ],
  "recommendations": [
    {{
      "priority": "high",
      "category": "Learning",
      "title": "string",
      "description": "string",
      "resources": ["resource 1", "resource 2"]
    }}
  ],
  "summary": "A comprehensive paragraph summarizing the analysis",
  "detailedFeedback": "Detailed paragraph with specific insights and observations",
  "estimatedSkillLevel": "intermediate",
  "readinessScore": 75
}}

IMPORTANT: Return ONLY the JSON object, no additional text or markdown formatting."""

TOPIC_LINE = "- {topic}: {correct}/{total} correct ({percentage:.1f}% score)"
INCORRECT_ANSWER_BLOCK = """Q: {question}
Candidate Answer: {candidate_answer}
Correct Answer: {correct_answer}
Topic: {topic}"""
NO_INCORRECT_ANSWERS = "None - all answers were correct!"

QUICK_FEEDBACK_PROMPT = """Provide a brief, encouraging explanation for why this answer is incorrect and what the correct approach should be:

Question: {question}
Candidate Answer: {candidate_answer}
Correct Answer: {correct_answer}

Keep the feedback constructive, brief (2-3 sentences), and educational."""

LEARNING_PATH_PROMPT = """Create a structured learning path to help a candidate improve for the role of {target_role}.

Current Weaknesses:
{weakness_topics}

Generate a 3-phase learning plan (Foundation → Intermediate → Advanced) with:
- Phase duration
- Topics to cover
- Resource recommendations
- Milestones to achieve

Return as JSON with structure:
{{
  "phases": [
    {{
      "phase": 1,
      "title": "Foundation Phase",
      "duration": "2-4 weeks",
      "topics": ["topic1", "topic2"],
      "resources": ["resource1", "resource2"],
      "milestones": ["milestone1", "milestone2"]
    }}
  ]
}}"""
