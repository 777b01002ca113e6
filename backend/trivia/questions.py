"""Built-in trivia question bank.

Read-only after import. Rooms sample from it through
``trivia.services.games.matchmaker.pick_questions``.
"""

from trivia.models import Question

QUESTION_BANK = (
    Question(1, 'What is React?', ('Framework', 'Library', 'Language', 'Database'), 1, 'Frontend'),
    Question(2, 'What is TypeScript?', ('A superset of JavaScript', 'Framework', 'Database', 'Operating system'), 0, 'Programming'),
    Question(3, 'What is Astro?', ('Framework', 'Library', 'Build tool', 'All of the above'), 3, 'Web Development'),
    Question(4, 'Which HTTP status code means "Not Found"?', ('200', '301', '404', '500'), 2, 'Web Development'),
    Question(5, 'Which language is primarily used to style web pages?', ('HTML', 'Python', 'CSS', 'SQL'), 2, 'Frontend'),
    Question(6, 'What does SQL stand for?', ('Structured Query Language', 'Simple Query Logic', 'Sequential Question List', 'Server Query Layer'), 0, 'Databases'),
    Question(7, 'Which data structure works first-in, first-out?', ('Stack', 'Queue', 'Tree', 'Graph'), 1, 'Computer Science'),
    Question(8, 'What does the "git clone" command do?', ('Deletes a repository', 'Copies a repository locally', 'Merges two branches', 'Creates a tag'), 1, 'Tools'),
    Question(9, 'Which protocol keeps a full-duplex connection open between browser and server?', ('FTP', 'SMTP', 'WebSocket', 'DNS'), 2, 'Networking'),
    Question(10, 'What is the time complexity of binary search?', ('O(n)', 'O(log n)', 'O(n log n)', 'O(1)'), 1, 'Computer Science'),
    Question(11, 'Which of these is a NoSQL database?', ('PostgreSQL', 'MySQL', 'MongoDB', 'SQLite'), 2, 'Databases'),
    Question(12, 'What does CSS "flex" layout arrange items along?', ('A grid only', 'A single axis', 'Absolute coordinates', 'Table cells'), 1, 'Frontend'),
    Question(13, 'Which HTTP method is idempotent and used to replace a resource?', ('POST', 'PUT', 'PATCH', 'CONNECT'), 1, 'Web Development'),
    Question(14, 'What is Node.js?', ('A browser', 'A JavaScript runtime', 'A CSS framework', 'A database'), 1, 'Backend'),
    Question(15, 'Which keyword declares a block-scoped constant in JavaScript?', ('var', 'let', 'const', 'static'), 2, 'Programming'),
)
