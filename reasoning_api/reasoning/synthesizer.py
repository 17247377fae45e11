"""
Response Synthesizer

Fills a fixed explanatory template with the four classification fields.
The input text itself is not echoed back; only reasoning type, category,
complexity and context vary between responses.
"""

from reasoning_api.models.schemas import InputAnalysis

RESPONSE_TEMPLATE = """Based on your {reasoning_type} question about {category} topics, here are some balanced insights:

This is a {complexity} complexity question that requires careful consideration. In the context of {context}, there are several perspectives to consider:

1. **Multiple Viewpoints**: Rather than assuming one correct answer, let's explore different angles and approaches to this topic.

2. **Real-world Application**: Consider how this applies to practical situations you might encounter in your daily life or professional environment.

3. **Limitations**: It's important to acknowledge what we don't know and areas where more information might be helpful for a complete understanding.

4. **Balanced Approach**: Instead of absolute statements, let's consider the nuances and trade-offs involved in this situation.

5. **Critical Thinking**: This encourages you to think deeper about the underlying assumptions and potential implications.

This response is generated by a prototype system designed to encourage critical thinking and avoid bias in reasoning.

*Note: This is a simulated response for demonstration purposes. In a production environment, this would integrate with advanced AI models.*"""


def synthesize(text: str, analysis: InputAnalysis) -> str:
    # .value keeps enum class names out of the rendered text
    return RESPONSE_TEMPLATE.format(
        reasoning_type=analysis.reasoning_type.value,
        category=analysis.category.value,
        complexity=analysis.complexity.value,
        context=analysis.context.value,
    )
