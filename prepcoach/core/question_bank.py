"""
Offline question bank for PrepCoach

Canned questions keyed by (role, difficulty, interview type). Lookups are
deterministic and cyclic: the k-th question of a session is
``bank[(k - 1) % len(bank)]``, so any number of questions can be served.
"""

import logging

from prepcoach.models.roles import Difficulty, InterviewType, Role

logger = logging.getLogger(__name__)

QuestionKey = tuple[Role, Difficulty, InterviewType]

DEFAULT_ROLE = Role.MERN
DEFAULT_DIFFICULTY = Difficulty.INTERMEDIATE
DEFAULT_TYPE = InterviewType.TECHNICAL
DEFAULT_KEY: QuestionKey = (DEFAULT_ROLE, DEFAULT_DIFFICULTY, DEFAULT_TYPE)

GENERIC_QUESTION = "Tell me about your experience with {role} development."


QUESTION_BANK: dict[QuestionKey, tuple[str, ...]] = {
    (Role.FRONTEND, Difficulty.BEGINNER, InterviewType.TECHNICAL): (
        "What is React and why is it popular?",
        "Explain the difference between props and state in React.",
        "What is JSX and how does it work?",
        "How do you handle events in React?",
        "What are React hooks? Give examples.",
        "Explain the difference between functional and class components.",
        "What is the Virtual DOM and why is it important?",
        "How do you conditionally render components in React?",
        "What is the purpose of keys in React lists?",
        "How do you pass data from parent to child components?",
    ),
    (Role.FRONTEND, Difficulty.BEGINNER, InterviewType.BEHAVIORAL): (
        "Tell me about yourself and your experience with frontend development.",
        "Why are you interested in frontend development?",
        "Describe a challenging frontend project you worked on.",
        "How do you handle tight deadlines in frontend projects?",
        "What motivates you in your work?",
        "How do you stay updated with frontend technologies?",
        "Describe a time you had to learn a new frontend framework quickly.",
        "How do you collaborate with designers?",
        "What is your approach to code reviews?",
        "Tell me about a time you improved user experience.",
    ),
    (Role.FRONTEND, Difficulty.BEGINNER, InterviewType.MIXED): (
        "What is React and why do you prefer it over other frameworks?",
        "Tell me about a React project you built and the challenges you faced.",
        "How do you handle state management in React applications?",
        "Describe a time you debugged a complex frontend issue.",
        "What is your approach to responsive design?",
        "How do you ensure code quality in frontend projects?",
        "What frontend technologies are you most excited about?",
        "How do you handle browser compatibility issues?",
        "Describe your experience with CSS frameworks.",
        "What is your approach to testing frontend code?",
    ),
    (Role.FRONTEND, Difficulty.INTERMEDIATE, InterviewType.TECHNICAL): (
        "Explain React component lifecycle methods.",
        "How does React handle re-rendering and optimization?",
        "What is the Virtual DOM and how does diffing work?",
        "Explain state management patterns in React applications.",
        "How do you optimize React performance?",
        "What are Higher-Order Components (HOCs)?",
        "Explain React Context API and when to use it.",
        "How do you handle side effects in React?",
        "What is the difference between useMemo and useCallback?",
        "How do you implement error boundaries in React?",
    ),
    (Role.FRONTEND, Difficulty.INTERMEDIATE, InterviewType.BEHAVIORAL): (
        "Describe your experience leading a frontend team.",
        "How do you mentor junior frontend developers?",
        "Tell me about a time you had to refactor a large frontend codebase.",
        "How do you handle conflicting requirements from stakeholders?",
        "What is your approach to frontend code reviews?",
        "Describe a challenging technical problem you solved.",
        "How do you balance performance with development speed?",
        "Tell me about a time you improved team productivity.",
        "How do you handle technical disagreements in your team?",
        "What is your approach to frontend architecture decisions?",
    ),
    (Role.FRONTEND, Difficulty.INTERMEDIATE, InterviewType.MIXED): (
        "How do you structure a large React application?",
        "Describe a performance optimization you implemented in React.",
        "How do you handle authentication in frontend applications?",
        "Tell me about a time you had to learn a new frontend framework quickly.",
        "What is your approach to testing React components?",
        "How do you handle API integration in React?",
        "Describe your experience with build tools and bundlers.",
        "How do you implement real-time features in frontend?",
        "What is your strategy for handling large component trees?",
        "How do you ensure accessibility in React applications?",
    ),
    (Role.FRONTEND, Difficulty.ADVANCED, InterviewType.TECHNICAL): (
        "Explain React Fiber architecture and its benefits.",
        "How do you implement code splitting and lazy loading in React?",
        "Discuss React Server Components and their use cases.",
        "How do you handle complex state management at scale?",
        "Explain React concurrent features and Suspense.",
        "How do you implement custom hooks for reusable logic?",
        "Discuss performance optimization techniques for large React apps.",
        "How do you handle memory leaks in React applications?",
        "Explain React's reconciliation algorithm in detail.",
        "How do you implement advanced patterns like render props and compound components?",
    ),
    (Role.FRONTEND, Difficulty.ADVANCED, InterviewType.BEHAVIORAL): (
        "How do you architect frontend systems for scalability?",
        "Describe your experience with micro-frontends.",
        "How do you handle technical debt in large frontend codebases?",
        "What is your approach to frontend architecture decisions?",
        "How do you ensure accessibility in your applications?",
        "Describe a time you had to make a difficult technical decision.",
        "How do you stay ahead of frontend technology trends?",
        "Tell me about a time you led a major frontend migration.",
        "How do you handle performance optimization at scale?",
        "What is your approach to frontend security?",
    ),
    (Role.FRONTEND, Difficulty.ADVANCED, InterviewType.MIXED): (
        "Design a scalable frontend architecture for a large application.",
        "How would you optimize a slow React application?",
        "Explain your approach to state management in complex React apps.",
        "Describe a challenging frontend problem you solved.",
        "How do you implement real-time features in React?",
        "What is your strategy for handling large datasets in the frontend?",
        "How do you ensure type safety in large React projects?",
        "Describe your experience with advanced React patterns.",
        "How do you handle internationalization in React apps?",
        "What is your approach to frontend monitoring and error tracking?",
    ),
    (Role.BACKEND, Difficulty.BEGINNER, InterviewType.TECHNICAL): (
        "What is REST API and how does it work?",
        "Explain the difference between GET and POST requests.",
        "What is a database and why do we need it?",
        "Explain authentication vs authorization.",
        "What is middleware in Express.js?",
        "How do you handle errors in Node.js?",
        "What is the difference between SQL and NoSQL databases?",
        "How do you connect to a database in Node.js?",
        "What is an API endpoint?",
        "Explain the request-response cycle.",
    ),
    (Role.BACKEND, Difficulty.BEGINNER, InterviewType.BEHAVIORAL): (
        "Tell me about yourself and your backend development experience.",
        "Why are you interested in backend development?",
        "Describe a backend project you worked on.",
        "How do you handle pressure in backend development?",
        "What motivates you in backend work?",
        "How do you stay updated with backend technologies?",
        "Describe a time you had to learn a new backend technology.",
        "How do you handle debugging backend issues?",
        "What is your approach to backend code organization?",
        "Tell me about a time you improved backend performance.",
    ),
    (Role.BACKEND, Difficulty.BEGINNER, InterviewType.MIXED): (
        "What is REST API and when would you use it?",
        "Tell me about a backend API you designed.",
        "How do you handle database connections?",
        "Describe a time you debugged a backend issue.",
        "What is your approach to API security?",
        "How do you ensure backend code quality?",
        "What backend technologies are you most excited about?",
        "How do you handle API versioning?",
        "Describe your experience with database design.",
        "What is your approach to error handling in APIs?",
    ),
    (Role.BACKEND, Difficulty.INTERMEDIATE, InterviewType.TECHNICAL): (
        "How do you handle database transactions?",
        "Explain API rate limiting and its implementation.",
        "What is caching and how do you implement it?",
        "How do you secure an API?",
        "Explain microservices architecture.",
        "How do you handle file uploads in Node.js?",
        "What is JWT and how do you implement it?",
        "How do you implement pagination in APIs?",
        "Explain database indexing and its importance.",
        "How do you handle background jobs and queues?",
    ),
    (Role.BACKEND, Difficulty.INTERMEDIATE, InterviewType.BEHAVIORAL): (
        "Describe your experience designing backend systems.",
        "How do you mentor junior backend developers?",
        "Tell me about a time you had to scale a backend system.",
        "How do you handle conflicting technical requirements?",
        "What is your approach to database design?",
        "Describe a challenging backend problem you solved.",
        "How do you balance performance with maintainability?",
        "Tell me about a time you improved system reliability.",
        "How do you handle technical debt in backend code?",
        "What is your approach to backend architecture decisions?",
    ),
    (Role.BACKEND, Difficulty.INTERMEDIATE, InterviewType.MIXED): (
        "How do you structure a scalable backend application?",
        "Describe a performance optimization you implemented.",
        "How do you handle authentication and authorization?",
        "Tell me about a time you had to refactor backend code.",
        "What is your approach to API versioning?",
        "How do you handle background jobs and queues?",
        "Describe your experience with database optimization.",
        "How do you implement logging and monitoring?",
        "What is your strategy for handling high traffic?",
        "How do you ensure data consistency in distributed systems?",
    ),
    (Role.BACKEND, Difficulty.ADVANCED, InterviewType.TECHNICAL): (
        "How do you design a scalable distributed system?",
        "Explain database sharding and partitioning strategies.",
        "How do you handle distributed transactions?",
        "Discuss event-driven architecture patterns.",
        "How do you implement real-time features at scale?",
        "Explain CAP theorem and its implications.",
        "How do you handle service discovery in microservices?",
        "Discuss different database replication strategies.",
        "How do you implement circuit breakers and retries?",
        "Explain eventual consistency and its trade-offs.",
    ),
    (Role.BACKEND, Difficulty.ADVANCED, InterviewType.BEHAVIORAL): (
        "How do you architect backend systems for millions of users?",
        "Describe your experience with distributed systems.",
        "How do you handle technical debt in backend codebases?",
        "What is your approach to system design decisions?",
        "How do you ensure data consistency in distributed systems?",
        "Describe a time you had to make a critical architecture decision.",
        "How do you stay current with backend technology trends?",
        "Tell me about a time you led a major system migration.",
        "How do you handle system reliability and fault tolerance?",
        "What is your approach to backend security at scale?",
    ),
    (Role.BACKEND, Difficulty.ADVANCED, InterviewType.MIXED): (
        "Design a scalable backend architecture for a high-traffic application.",
        "How would you optimize a slow database query?",
        "Explain your approach to handling high concurrency.",
        "Describe a challenging distributed systems problem you solved.",
        "How do you implement event sourcing and CQRS?",
        "What is your strategy for handling large-scale data processing?",
        "How do you ensure system reliability and fault tolerance?",
        "Describe your experience with message queues and brokers.",
        "How do you handle data consistency across microservices?",
        "What is your approach to monitoring and observability?",
    ),
    (Role.MERN, Difficulty.BEGINNER, InterviewType.TECHNICAL): (
        "What is the MERN stack and its components?",
        "Explain how React connects to the Express backend.",
        "What is MongoDB and why use it?",
        "How do you structure a MERN application?",
        "What is Express.js and its role in MERN?",
        "How do you handle API calls from React to Express?",
        "What is the role of Node.js in the MERN stack?",
        "How do you create RESTful APIs in Express?",
        "Explain how data flows in a MERN application.",
        "What is Mongoose and how do you use it?",
    ),
    (Role.MERN, Difficulty.BEGINNER, InterviewType.BEHAVIORAL): (
        "Tell me about yourself and your MERN stack experience.",
        "Why are you interested in full-stack development?",
        "Describe a MERN project you built.",
        "How do you handle full-stack development challenges?",
        "What motivates you in full-stack work?",
        "How do you stay updated with MERN technologies?",
        "Describe a time you learned a new MERN technology.",
        "How do you handle debugging full-stack applications?",
        "What is your approach to full-stack code organization?",
        "Tell me about a time you improved a MERN application.",
    ),
    (Role.MERN, Difficulty.BEGINNER, InterviewType.MIXED): (
        "What is the MERN stack and why did you choose it?",
        "Tell me about a full-stack application you built with MERN.",
        "How do you handle data flow from frontend to backend?",
        "Describe a time you debugged a full-stack issue.",
        "What is your approach to full-stack architecture?",
        "How do you ensure consistency between frontend and backend?",
        "What MERN technologies are you most excited about?",
        "How do you handle authentication in MERN applications?",
        "Describe your experience with MongoDB.",
        "What is your approach to full-stack testing?",
    ),
    (Role.MERN, Difficulty.INTERMEDIATE, InterviewType.TECHNICAL): (
        "How do you handle authentication in a MERN application?",
        "Explain data flow in a MERN application.",
        "How do you structure MongoDB schemas?",
        "What is JWT and how do you use it in MERN?",
        "How do you handle file uploads in MERN?",
        "Explain state management in MERN applications.",
        "How do you handle API errors in MERN?",
        "How do you implement pagination in MERN?",
        "Explain MongoDB aggregation pipelines.",
        "How do you handle real-time features in MERN?",
    ),
    (Role.MERN, Difficulty.INTERMEDIATE, InterviewType.BEHAVIORAL): (
        "Describe your experience building full-stack applications.",
        "How do you mentor junior MERN developers?",
        "Tell me about a time you had to refactor a MERN application.",
        "How do you handle full-stack debugging?",
        "What is your approach to full-stack testing?",
        "Describe a challenging MERN problem you solved.",
        "How do you balance frontend and backend development?",
        "Tell me about a time you improved MERN application performance.",
        "How do you handle technical debt in MERN projects?",
        "What is your approach to full-stack architecture decisions?",
    ),
    (Role.MERN, Difficulty.INTERMEDIATE, InterviewType.MIXED): (
        "How do you structure a scalable MERN application?",
        "Describe a performance optimization you implemented in MERN.",
        "How do you handle real-time features in MERN?",
        "Tell me about a time you integrated a third-party API.",
        "What is your approach to database design in MERN?",
        "How do you handle authentication and authorization?",
        "Describe your experience with MERN deployment.",
        "How do you implement caching in MERN applications?",
        "What is your strategy for handling large datasets?",
        "How do you ensure security in MERN applications?",
    ),
    (Role.MERN, Difficulty.ADVANCED, InterviewType.TECHNICAL): (
        "How do you optimize MERN stack performance?",
        "Explain server-side rendering with MERN.",
        "How do you implement real-time features in MERN?",
        "Discuss MERN stack security best practices.",
        "How do you scale a MERN application?",
        "Explain advanced MongoDB aggregation pipelines.",
        "How do you handle microservices with MERN?",
        "Discuss advanced state management patterns in MERN.",
        "How do you implement advanced caching strategies?",
        "Explain database optimization techniques for MongoDB.",
    ),
    (Role.MERN, Difficulty.ADVANCED, InterviewType.BEHAVIORAL): (
        "How do you architect large-scale MERN applications?",
        "Describe your experience with MERN at scale.",
        "How do you handle technical debt in MERN projects?",
        "What is your approach to full-stack architecture decisions?",
        "How do you ensure security in MERN applications?",
        "Describe a time you made a critical MERN architecture decision.",
        "How do you stay ahead of MERN technology trends?",
        "Tell me about a time you led a major MERN migration.",
        "How do you handle performance optimization at scale?",
        "What is your approach to full-stack monitoring?",
    ),
    (Role.MERN, Difficulty.ADVANCED, InterviewType.MIXED): (
        "Design a scalable MERN architecture for a large application.",
        "How would you optimize a slow MERN application?",
        "Explain your approach to handling high traffic in MERN.",
        "Describe a challenging full-stack problem you solved.",
        "How do you implement advanced features in MERN?",
        "What is your strategy for handling large datasets in MERN?",
        "How do you ensure type safety across the MERN stack?",
        "Describe your experience with advanced MERN patterns.",
        "How do you handle internationalization in MERN apps?",
        "What is your approach to full-stack monitoring and error tracking?",
    ),
    (Role.FULL_STACK, Difficulty.BEGINNER, InterviewType.TECHNICAL): (
        "What is full-stack development?",
        "Explain the difference between frontend and backend.",
        "What technologies are used in full-stack development?",
        "How do frontend and backend communicate?",
        "What is an API and why is it important?",
        "Explain the request-response cycle.",
        "What is the role of a database in full-stack applications?",
        "How do you structure a full-stack application?",
        "What is the difference between client-side and server-side rendering?",
        "How do you handle errors in full-stack applications?",
    ),
    (Role.FULL_STACK, Difficulty.BEGINNER, InterviewType.BEHAVIORAL): (
        "Tell me about yourself and your full-stack experience.",
        "Why are you interested in full-stack development?",
        "Describe a full-stack project you worked on.",
        "How do you handle full-stack development challenges?",
        "What motivates you in full-stack work?",
        "How do you stay updated with full-stack technologies?",
        "Describe a time you learned a new full-stack technology.",
        "How do you handle debugging full-stack issues?",
        "What is your approach to full-stack code organization?",
        "Tell me about a time you improved a full-stack application.",
    ),
    (Role.FULL_STACK, Difficulty.BEGINNER, InterviewType.MIXED): (
        "What is full-stack development and why do you like it?",
        "Tell me about a full-stack application you built.",
        "How do you handle the full development lifecycle?",
        "Describe a time you debugged a full-stack issue.",
        "What is your approach to full-stack architecture?",
        "How do you ensure quality in full-stack projects?",
        "What full-stack technologies are you most excited about?",
        "How do you handle API design in full-stack apps?",
        "Describe your experience with database design.",
        "What is your approach to full-stack testing?",
    ),
    (Role.FULL_STACK, Difficulty.INTERMEDIATE, InterviewType.TECHNICAL): (
        "How do you design a full-stack application architecture?",
        "Explain authentication flow in full-stack applications.",
        "How do you handle state management across frontend and backend?",
        "What is your approach to API design?",
        "How do you handle database design in full-stack apps?",
        "Explain deployment strategies for full-stack applications.",
        "How do you ensure security in full-stack applications?",
        "How do you handle real-time features in full-stack apps?",
        "Explain caching strategies in full-stack applications.",
        "How do you implement error handling across the stack?",
    ),
    (Role.FULL_STACK, Difficulty.INTERMEDIATE, InterviewType.BEHAVIORAL): (
        "Describe your experience leading full-stack projects.",
        "How do you mentor junior full-stack developers?",
        "Tell me about a time you had to refactor a full-stack application.",
        "How do you handle full-stack debugging?",
        "What is your approach to full-stack testing?",
        "Describe a challenging full-stack problem you solved.",
        "How do you balance frontend and backend priorities?",
        "Tell me about a time you improved full-stack performance.",
        "How do you handle technical debt in full-stack projects?",
        "What is your approach to full-stack architecture decisions?",
    ),
    (Role.FULL_STACK, Difficulty.INTERMEDIATE, InterviewType.MIXED): (
        "How do you structure a scalable full-stack application?",
        "Describe a performance optimization you implemented.",
        "How do you handle real-time features in full-stack apps?",
        "Tell me about a time you integrated multiple services.",
        "What is your approach to database optimization?",
        "How do you handle authentication and authorization?",
        "Describe your experience with full-stack deployment.",
        "How do you implement logging and monitoring?",
        "What is your strategy for handling high traffic?",
        "How do you ensure data consistency?",
    ),
    (Role.FULL_STACK, Difficulty.ADVANCED, InterviewType.TECHNICAL): (
        "How do you design a scalable full-stack architecture?",
        "Explain microservices architecture in full-stack context.",
        "How do you handle distributed systems in full-stack apps?",
        "Discuss advanced security patterns in full-stack development.",
        "How do you scale full-stack applications?",
        "Explain event-driven architecture in full-stack systems.",
        "How do you handle high concurrency in full-stack applications?",
        "Discuss advanced caching strategies.",
        "How do you implement advanced authentication patterns?",
        "Explain database optimization at scale.",
    ),
    (Role.FULL_STACK, Difficulty.ADVANCED, InterviewType.BEHAVIORAL): (
        "How do you architect enterprise-level full-stack systems?",
        "Describe your experience with full-stack at scale.",
        "How do you handle technical debt in large full-stack projects?",
        "What is your approach to full-stack architecture decisions?",
        "How do you ensure system reliability in full-stack apps?",
        "Describe a time you made a critical full-stack architecture decision.",
        "How do you stay ahead of full-stack technology trends?",
        "Tell me about a time you led a major full-stack migration.",
        "How do you handle performance optimization at scale?",
        "What is your approach to full-stack security?",
    ),
    (Role.FULL_STACK, Difficulty.ADVANCED, InterviewType.MIXED): (
        "Design a scalable full-stack architecture for millions of users.",
        "How would you optimize a slow full-stack application?",
        "Explain your approach to handling high traffic.",
        "Describe a challenging distributed systems problem you solved.",
        "How do you implement advanced features in full-stack apps?",
        "What is your strategy for handling large-scale data processing?",
        "How do you ensure type safety and consistency across the stack?",
        "Describe your experience with advanced full-stack patterns.",
        "How do you handle internationalization in full-stack apps?",
        "What is your approach to full-stack monitoring and observability?",
    ),
}


def _coerce(enum_cls, value, default):
    try:
        return enum_cls(value)
    except ValueError:
        return default


def resolve_bucket(
    role: Role | str,
    difficulty: Difficulty | str,
    interview_type: InterviewType | str,
    bank: dict[QuestionKey, tuple[str, ...]] = QUESTION_BANK,
) -> tuple[str, ...]:
    """
    Find the question list for a combination.

    Falls back in order: the exact bucket, the same role's default
    difficulty and type, then the default bucket. Returns an empty tuple
    only when none of those exist.
    """
    role_key = _coerce(Role, role, DEFAULT_ROLE)
    difficulty_key = _coerce(Difficulty, difficulty, DEFAULT_DIFFICULTY)
    type_key = _coerce(InterviewType, interview_type, DEFAULT_TYPE)

    for key in (
        (role_key, difficulty_key, type_key),
        (role_key, difficulty_key, DEFAULT_TYPE),
        (role_key, DEFAULT_DIFFICULTY, DEFAULT_TYPE),
        DEFAULT_KEY,
    ):
        questions = bank.get(key)
        if questions:
            return questions
    return ()


def get_question(
    role: Role | str,
    difficulty: Difficulty | str,
    interview_type: InterviewType | str,
    question_number: int,
    bank: dict[QuestionKey, tuple[str, ...]] = QUESTION_BANK,
) -> str:
    """
    Get the canned question for a 1-indexed question number.

    Never raises: unknown combinations use the default bucket, and an empty
    bank yields a templated generic question.
    """
    questions = resolve_bucket(role, difficulty, interview_type, bank)
    role_name = role.value if isinstance(role, Role) else str(role)

    if not questions:
        return GENERIC_QUESTION.format(role=role_name)

    index = (max(1, question_number) - 1) % len(questions)
    question = questions[index]
    logger.debug(f"Bank question {question_number} for {role_name}: {question[:50]}")
    return question
