# questionfeed_frontend/app.py
import flet as ft

from questionfeed_frontend.api_client import ApiClient, ApiError


def stats_line(stats: dict) -> str:
    return (
        f"{stats['totalQuestions']} questions · "
        f"{stats['questionsToday']} today · "
        f"${stats['totalDonations']:.2f} donated"
    )


def feed_tile(q: dict) -> ft.Control:
    return ft.Container(
        content=ft.Column(
            [
                ft.Text(q["question"], selectable=True),
                ft.Text(f"${q['donation']:.2f} · {q['email']} · {q['createdAt']}", size=12),
            ],
            spacing=2,
        ),
        padding=10,
    )


def main(page: ft.Page, client: ApiClient = None):
    client = client or ApiClient()

    page.title = "Question Feed"
    page.window_width = 800
    page.window_height = 720

    question_tf = ft.TextField(label="Your question", multiline=True, max_length=1000, width=600)
    email_tf = ft.TextField(label="Email", width=320)
    donation_tf = ft.TextField(label="Donation ($)", width=160, value="1.00")
    msg = ft.Text("", selectable=True)
    stats_txt = ft.Text("")
    feed = ft.ListView(expand=True, spacing=4)

    def refresh(_=None):
        try:
            stats_txt.value = stats_line(client.stats())
            feed.controls = [feed_tile(q) for q in client.list_questions()]
        except Exception as ex:
            msg.value = f"Could not load feed: {ex}"
        page.update()

    def do_submit(_):
        msg.value = ""
        page.update()
        try:
            created = client.submit_question(question_tf.value, email_tf.value, donation_tf.value)
            msg.value = f"Question submitted ({created['_id']})"
            question_tf.value = ""
        except ApiError as ex:
            msg.value = ex.message
        except Exception as ex:
            msg.value = f"Submit failed: {ex}"
        refresh()

    form = ft.Column(
        [
            question_tf,
            ft.Row([email_tf, donation_tf]),
            ft.Row(
                [
                    ft.ElevatedButton("Submit", on_click=do_submit),
                    ft.OutlinedButton("Refresh", on_click=refresh),
                ]
            ),
            msg,
        ],
        spacing=10,
    )

    page.add(form, ft.Divider(), stats_txt, feed)
    refresh()


# ---- Flet App bootstrap ----
if __name__ == "__main__":
    ft.app(target=main)
